from typing import Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


def new_id() -> str:
    return str(uuid4())


class IDModel(SQLModel):
    id: str = Field(default_factory=new_id, primary_key=True, index=True)


class RowIDModel(SQLModel):
    # Storage-internal key; the user-facing columns stay non-unique.
    row_id: Optional[int] = Field(default=None, primary_key=True)
