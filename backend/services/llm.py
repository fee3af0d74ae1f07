import logging
from dataclasses import dataclass
from typing import Optional

from openai import OpenAI, OpenAIError

from config import get_api_key, MOCK_MODE, OPENAI_MODEL, MAX_COMPLETION_TOKENS, OPENAI_TIMEOUT_SECONDS
from exceptions import GenerationError

logger = logging.getLogger(__name__)


# Lazy client initialization
_client = None


def get_client():
    global _client
    if _client is None:
        api_key = get_api_key()
        if not api_key:
            raise GenerationError(
                "OPENAI_API_KEY not configured. Set it in environment, .env file, or ~/.openai/api_key"
            )
        _client = OpenAI(api_key=api_key, timeout=OPENAI_TIMEOUT_SECONDS)
    return _client


@dataclass(frozen=True)
class GenerationOptions:
    model: str = OPENAI_MODEL
    temperature: Optional[float] = None
    max_output_tokens: int = MAX_COMPLETION_TOKENS
    system_prompt: Optional[str] = None
    # Label used in logs and by the mock generator to pick a canned answer
    purpose: str = "general"


class TextGenerator:
    """A text-generation capability: a prompt or a conversation in, text out.

    Implementations raise GenerationError on any failure, including an
    empty completion.
    """

    source = "mock"

    def complete(self, messages: list[dict], options: Optional[GenerationOptions] = None) -> str:
        raise NotImplementedError

    def generate(self, prompt: str, options: Optional[GenerationOptions] = None) -> str:
        options = options or GenerationOptions()
        messages = []
        if options.system_prompt:
            messages.append({"role": "system", "content": options.system_prompt})
        messages.append({"role": "user", "content": prompt})
        return self.complete(messages, options)


class OpenAIGenerator(TextGenerator):
    source = "openai"

    def __init__(self, client=None):
        self._client = client

    def complete(self, messages: list[dict], options: Optional[GenerationOptions] = None) -> str:
        options = options or GenerationOptions()
        client = self._client or get_client()

        kwargs = {
            "model": options.model,
            "max_completion_tokens": options.max_output_tokens,
            "messages": list(messages),
        }
        if options.temperature is not None:
            kwargs["temperature"] = options.temperature

        try:
            response = client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            logger.warning("OpenAI %s call failed: %s", options.purpose, e)
            raise GenerationError(f"Text generation failed: {e}") from e

        response_text = response.choices[0].message.content if response.choices else None
        if not response_text or not response_text.strip():
            raise GenerationError("Text generation returned an empty response")
        return response_text


def get_generator() -> TextGenerator:
    """FastAPI dependency for the clause pipeline's generator"""
    if MOCK_MODE:
        from services.mock import MockGenerator
        return MockGenerator()
    return OpenAIGenerator()


def get_chat_generator() -> Optional[TextGenerator]:
    """Generator for the support chat, or None when no API key is configured"""
    if MOCK_MODE:
        from services.mock import MockGenerator
        return MockGenerator()
    if not get_api_key():
        return None
    return OpenAIGenerator()
