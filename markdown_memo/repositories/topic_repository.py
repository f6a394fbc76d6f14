from typing import Optional, Sequence
from sqlalchemy import func, or_
from sqlmodel import Session, col, select
from markdown_memo.models.memo import Memo
from markdown_memo.models.topic import Topic
from markdown_memo.models.topic_tag import TopicTag


def list_all_topics(session: Session) -> list[Topic]:
    return list(session.exec(select(Topic)).all())


def get_topic(session: Session, topic_id: str) -> Optional[Topic]:
    return session.exec(select(Topic).where(Topic.id == topic_id)).first()


def create_topic(session: Session, topic_id: str, title: str, timestamp: int) -> Topic:
    record = Topic(id=topic_id, title=title, timestamp=timestamp)
    session.add(record)
    session.flush()
    return record


def update_topic(session: Session, topic_id: str, title: str, timestamp: int) -> list[Topic]:
    records = list(session.exec(select(Topic).where(Topic.id == topic_id)).all())
    for record in records:
        record.title = title
        record.timestamp = timestamp
        session.add(record)
    session.flush()
    return records


def delete_topic(session: Session, topic_id: str) -> None:
    for record in session.exec(select(Topic).where(Topic.id == topic_id)).all():
        session.delete(record)
    session.flush()


def search_topics(session: Session, words: Sequence[str], tags: Sequence[str]) -> list[Topic]:
    """Topics with a memo containing any of ``words`` and a tag named any of ``tags``.

    An empty group places no restriction. Word matching is a case-sensitive
    literal substring test; every token is bound as a parameter.
    """
    statement = select(Topic)
    if words:
        memo_match = or_(*(func.instr(Memo.content, word) > 0 for word in words))
        statement = statement.where(
            col(Topic.id).in_(select(Memo.topic_id).where(memo_match).distinct())
        )
    if tags:
        statement = statement.where(
            col(Topic.id).in_(
                select(TopicTag.topic_id).where(col(TopicTag.name).in_(list(tags))).distinct()
            )
        )
    return list(session.exec(statement).all())
