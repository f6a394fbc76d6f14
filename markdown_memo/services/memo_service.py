from __future__ import annotations

import time
from typing import Optional

from loguru import logger

from markdown_memo.core.errors import NotFound
from markdown_memo.db.session import Storage
from markdown_memo.models.base import new_id
from markdown_memo.models.memo import Memo
from markdown_memo.repositories import memo_repository, topic_repository, topic_tag_repository
from markdown_memo.schemas.memo import MemoOut

TITLE_MAX_LEN = 10


def parse_title(content: str) -> str:
    """Short heading-like label: leading ``#`` dropped, first line, ten characters, trimmed."""
    first_line = content.lstrip('#').split('\n', 1)[0]
    return first_line[:TITLE_MAX_LEN].strip()


def _to_out(record: Memo, latest: bool) -> MemoOut:
    return MemoOut(
        id=record.id,
        topic_id=record.topic_id,
        timestamp=record.timestamp,
        latest=latest,
        content=record.content,
    )


def _empty_memo(topic_id: str) -> MemoOut:
    return MemoOut(id='', topic_id=topic_id, timestamp=0, latest=True, content='')


def create_memo(storage: Storage, topic_id: str, content: str) -> MemoOut:
    memo_id = new_id()
    title = parse_title(content)
    timestamp = int(time.time())

    with storage.session() as session:
        if topic_repository.get_topic(session, topic_id) is not None:
            topic_repository.update_topic(session, topic_id, title, timestamp)
        else:
            topic_repository.create_topic(session, topic_id, title, timestamp)
        record = memo_repository.create_memo(session, memo_id, topic_id, timestamp, content)
        memo = _to_out(record, latest=True)

    logger.info('memo.created', topic_id=topic_id, memo_id=memo_id)
    return memo


def delete_memo(storage: Storage, topic_id: str, memo_id: str) -> None:
    with storage.session() as session:
        delete_all = True
        for record in memo_repository.list_by_topic(session, topic_id):
            if record.id == memo_id:
                memo_repository.delete_memo(session, record.id)
            else:
                delete_all = False

        if delete_all:
            topic_repository.delete_topic(session, topic_id)
            for name in topic_tag_repository.list_tags(session, topic_id):
                topic_tag_repository.delete_tag(session, name, topic_id)

    logger.info('memo.deleted', topic_id=topic_id, memo_id=memo_id)
    if delete_all:
        logger.info('topic.cascade_deleted', topic_id=topic_id)


def get_memo(storage: Storage, topic_id: str, memo_id: Optional[str] = None) -> MemoOut:
    with storage.session() as session:
        try:
            latest = memo_repository.latest(session, topic_id)
        except NotFound:
            return _empty_memo(topic_id)

        target_id = memo_id if memo_id is not None else latest.id
        record = next(
            (item for item in memo_repository.list_by_topic(session, topic_id) if item.id == target_id),
            None,
        )
        if record is None:
            raise NotFound(target_id)
        return _to_out(record, latest=record.id == latest.id)


def get_all_memos(storage: Storage, topic_id: str) -> list[MemoOut]:
    with storage.session() as session:
        records = memo_repository.list_by_topic(session, topic_id)
        records.sort(key=lambda item: item.timestamp, reverse=True)
        return [_to_out(record, latest=index == 0) for index, record in enumerate(records)]
