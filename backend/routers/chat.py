import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from prompts.chat import CHAT_ERROR_MESSAGE, CHAT_FALLBACK_MESSAGE
from schemas.chat import ChatInput, ChatReply
from services.chat import respond_to_chat
from services.llm import get_chat_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=ChatReply, response_model_exclude_none=True)
async def chat(request: Request):
    """Property management support chat. Always answers, degrading to static messages."""
    try:
        try:
            body = await request.json()
            messages = ChatInput.model_validate(body).messages
        except (ValueError, ValidationError):
            # Unreadable body or no usable conversation: reply with the greeting
            messages = None

        return await run_in_threadpool(respond_to_chat, messages, get_chat_generator())

    except Exception:
        logger.exception("General chat API error")
        return ChatReply(message=CHAT_ERROR_MESSAGE, error="An unexpected error occurred")


@router.post("/chat/mock", response_model=ChatReply, response_model_exclude_none=True)
async def chat_mock():
    """Static stand-in for the chat endpoint"""
    return ChatReply(message=CHAT_FALLBACK_MESSAGE, source="mock")
