from pydantic import BaseModel


class MemoOut(BaseModel):
    id: str
    topic_id: str
    timestamp: int
    latest: bool
    content: str


class TopicOut(BaseModel):
    id: str
    title: str
    timestamp: int
