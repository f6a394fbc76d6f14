from sqlmodel import Field, SQLModel
from markdown_memo.models.base import RowIDModel


class Topic(RowIDModel, SQLModel, table=True):
    __tablename__ = 'topic'

    id: str = Field(index=True)
    title: str = ''
    timestamp: int = 0
