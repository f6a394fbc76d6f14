from sqlmodel import Field, SQLModel
from markdown_memo.models.base import IDModel


class Memo(IDModel, SQLModel, table=True):
    __tablename__ = 'memo'

    topic_id: str = Field(index=True)
    timestamp: int = 0
    content: str = ''
