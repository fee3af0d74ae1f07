from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    error: str
    normalizedState: Optional[str] = None


class StateInfo(BaseModel):
    name: str
    key: str
