from pydantic import BaseModel
from typing import Literal, Optional


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatInput(BaseModel):
    messages: list[ChatMessage]


class ChatReply(BaseModel):
    message: str
    source: Optional[Literal["openai", "fallback", "mock"]] = None
    error: Optional[str] = None
