from sqlalchemy.engine import Engine
from sqlmodel import SQLModel
from markdown_memo.models import (  # noqa: F401
    memo,
    topic,
    topic_tag,
)


def init_db(engine: Engine, drop_all: bool = False) -> None:
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
