from sqlmodel import Field, SQLModel
from markdown_memo.models.base import RowIDModel


class TopicTag(RowIDModel, SQLModel, table=True):
    __tablename__ = 'topic_tag'

    name: str = Field(index=True)
    topic_id: str = Field(index=True)
