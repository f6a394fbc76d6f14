from __future__ import annotations

import re

from markdown_memo.db.session import Storage
from markdown_memo.repositories import topic_repository
from markdown_memo.schemas.memo import TopicOut

# Unicode White_Space: \s without the \x1c-\x1f separators.
_SEPARATOR = re.compile(r'[^\S\x1c-\x1f]')


def split_keyword(keyword: str) -> tuple[list[str], list[str]]:
    """Split a search string into word tokens and ``#tag`` tokens.

    Tags need at least two characters after the ``#``, words at least two
    characters; shorter tokens are dropped.
    """
    words: list[str] = []
    tags: list[str] = []
    for token in _SEPARATOR.split(keyword):
        if token.startswith('#') and len(token) > 2:
            tags.append(token.lstrip('#'))
        elif not token.startswith('#') and len(token) > 1:
            words.append(token)
    return words, tags


def get_topics(storage: Storage, keyword: str) -> list[TopicOut]:
    with storage.session() as session:
        if not keyword:
            records = topic_repository.list_all_topics(session)
        else:
            words, tags = split_keyword(keyword)
            records = topic_repository.search_topics(session, words, tags)
        topics = [TopicOut(id=item.id, title=item.title, timestamp=item.timestamp) for item in records]
    topics.sort(key=lambda item: item.timestamp, reverse=True)
    return topics
