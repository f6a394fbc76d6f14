from sqlmodel import Session, select
from markdown_memo.models.topic_tag import TopicTag


def list_tags(session: Session, topic_id: str) -> list[str]:
    return list(session.exec(select(TopicTag.name).where(TopicTag.topic_id == topic_id)).all())


def create_tag(session: Session, name: str, topic_id: str) -> TopicTag:
    record = TopicTag(name=name, topic_id=topic_id)
    session.add(record)
    session.flush()
    return record


def delete_tag(session: Session, name: str, topic_id: str) -> None:
    records = session.exec(
        select(TopicTag).where((TopicTag.name == name) & (TopicTag.topic_id == topic_id))
    ).all()
    for record in records:
        session.delete(record)
    session.flush()
