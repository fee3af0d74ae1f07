from schemas.common import ErrorResponse, StateInfo
from schemas.lease import ClauseRequest, PipelineResult
from schemas.chat import ChatMessage, ChatInput, ChatReply
