from sqlmodel import Session, select
from markdown_memo.core.errors import NotFound
from markdown_memo.models.memo import Memo


def list_by_topic(session: Session, topic_id: str) -> list[Memo]:
    return list(session.exec(select(Memo).where(Memo.topic_id == topic_id)).all())


def latest(session: Session, topic_id: str) -> Memo:
    record = session.exec(
        select(Memo).where(Memo.topic_id == topic_id).order_by(Memo.timestamp.desc()).limit(1)
    ).first()
    if record is None:
        raise NotFound(topic_id)
    return record


def create_memo(session: Session, memo_id: str, topic_id: str, timestamp: int, content: str) -> Memo:
    record = Memo(id=memo_id, topic_id=topic_id, timestamp=timestamp, content=content)
    session.add(record)
    session.flush()
    return record


def delete_memo(session: Session, memo_id: str) -> None:
    for record in session.exec(select(Memo).where(Memo.id == memo_id)).all():
        session.delete(record)
    session.flush()
