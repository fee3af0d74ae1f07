import logging
from typing import Optional

from config import CHAT_MODEL, CHAT_TEMPERATURE, CHAT_MAX_TOKENS
from exceptions import GenerationError
from prompts.chat import CHAT_SYSTEM_PROMPT, CHAT_GREETING, CHAT_FALLBACK_MESSAGE
from schemas.chat import ChatMessage, ChatReply
from services.llm import GenerationOptions, TextGenerator

logger = logging.getLogger(__name__)

CHAT_OPTIONS = GenerationOptions(
    model=CHAT_MODEL,
    temperature=CHAT_TEMPERATURE,
    max_output_tokens=CHAT_MAX_TOKENS,
    purpose="chat",
)


def with_system_prompt(messages: list[ChatMessage]) -> list[dict]:
    """Conversation as plain dicts, with the assistant's system prompt first if none is set"""
    conversation = [m.model_dump() for m in messages]
    if not any(m["role"] == "system" for m in conversation):
        conversation.insert(0, {"role": "system", "content": CHAT_SYSTEM_PROMPT})
    return conversation


def respond_to_chat(messages: Optional[list[ChatMessage]], generator: Optional[TextGenerator]) -> ChatReply:
    if not messages:
        return ChatReply(message=CHAT_GREETING, source="mock")

    if generator is not None:
        try:
            reply = generator.complete(with_system_prompt(messages), CHAT_OPTIONS)
            return ChatReply(message=reply, source=generator.source)
        except GenerationError as e:
            logger.error(f"Chat generation error: {e.message}")

    return ChatReply(message=CHAT_FALLBACK_MESSAGE, source="fallback")
