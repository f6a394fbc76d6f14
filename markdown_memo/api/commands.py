from __future__ import annotations

import functools
from typing import Any, Callable, Optional

from loguru import logger
from pydantic import BaseModel, ValidationError, validate_call

from markdown_memo.core.errors import MemoError
from markdown_memo.db.session import get_storage
from markdown_memo.schemas.memo import MemoOut, TopicOut
from markdown_memo.services import memo_service, tag_service, topic_service


class CommandError(Exception):
    """Opaque failure reported across the command boundary."""

    def __init__(self, command: str) -> None:
        super().__init__(f'command failed: {command}')
        self.command = command


def command(func: Callable[..., Any]) -> Callable[..., Any]:
    # Payloads are checked against the signature before any storage access.
    validated = validate_call(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return validated(*args, **kwargs)
        except ValidationError as exc:
            logger.warning('command.bad_arguments', command=func.__name__, error=str(exc))
            raise CommandError(func.__name__) from exc

    return wrapper


def _run(command: str, func: Callable[..., Any], *args: Any) -> Any:
    try:
        return func(get_storage(), *args)
    except MemoError as exc:
        logger.warning('command.failed', command=command, error_type=type(exc).__name__, error=str(exc))
        raise CommandError(command) from exc


@command
def add_memo_tag(topic_id: str, tag: str) -> None:
    _run('add_memo_tag', tag_service.add_memo_tag, topic_id, tag)


@command
def create_memo(topic_id: str, content: str) -> MemoOut:
    return _run('create_memo', memo_service.create_memo, topic_id, content)


@command
def delete_memo(topic_id: str, id: str) -> None:
    _run('delete_memo', memo_service.delete_memo, topic_id, id)


@command
def get_memo(topic_id: str, id: Optional[str] = None) -> MemoOut:
    return _run('get_memo', memo_service.get_memo, topic_id, id)


@command
def get_memo_all(topic_id: str) -> list[MemoOut]:
    return _run('get_memo_all', memo_service.get_all_memos, topic_id)


@command
def get_memo_tag(topic_id: str) -> list[str]:
    return _run('get_memo_tag', tag_service.get_memo_tags, topic_id)


@command
def get_topics(keyword: str) -> list[TopicOut]:
    return _run('get_topics', topic_service.get_topics, keyword)


@command
def remove_memo_tag(topic_id: str, tag: str) -> None:
    _run('remove_memo_tag', tag_service.remove_memo_tag, topic_id, tag)


COMMANDS: dict[str, Callable[..., Any]] = {
    'add_memo_tag': add_memo_tag,
    'create_memo': create_memo,
    'delete_memo': delete_memo,
    'get_memo': get_memo,
    'get_memo_all': get_memo_all,
    'get_memo_tag': get_memo_tag,
    'get_topics': get_topics,
    'remove_memo_tag': remove_memo_tag,
}


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def invoke(name: str, **kwargs: Any) -> Any:
    handler = COMMANDS.get(name)
    if handler is None:
        logger.warning('command.unknown', command=name)
        raise CommandError(name)
    return _dump(handler(**kwargs))
