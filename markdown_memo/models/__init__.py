from markdown_memo.models.base import IDModel, RowIDModel
from markdown_memo.models.memo import Memo
from markdown_memo.models.topic import Topic
from markdown_memo.models.topic_tag import TopicTag

__all__ = [
    'IDModel',
    'RowIDModel',
    'Memo',
    'Topic',
    'TopicTag',
]
