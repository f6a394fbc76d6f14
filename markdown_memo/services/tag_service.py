from loguru import logger

from markdown_memo.db.session import Storage
from markdown_memo.repositories import topic_tag_repository


def add_memo_tag(storage: Storage, topic_id: str, name: str) -> None:
    with storage.session() as session:
        topic_tag_repository.create_tag(session, name, topic_id)
    logger.info('tag.added', topic_id=topic_id, name=name)


def remove_memo_tag(storage: Storage, topic_id: str, name: str) -> None:
    with storage.session() as session:
        topic_tag_repository.delete_tag(session, name, topic_id)
    logger.info('tag.removed', topic_id=topic_id, name=name)


def get_memo_tags(storage: Storage, topic_id: str) -> list[str]:
    with storage.session() as session:
        return topic_tag_repository.list_tags(session, topic_id)
