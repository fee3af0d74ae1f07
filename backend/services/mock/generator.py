from typing import Optional

from services.llm import GenerationOptions, TextGenerator
from services.mock.chat import mock_chat_reply
from services.mock.clauses import mock_legal_review, mock_rewrite_response


class MockGenerator(TextGenerator):
    """Deterministic stand-in for the model, selected by MOCK_MODE"""

    source = "mock"

    def complete(self, messages: list[dict], options: Optional[GenerationOptions] = None) -> str:
        options = options or GenerationOptions()
        user_messages = [m["content"] for m in messages if m.get("role") == "user"]
        latest = user_messages[-1] if user_messages else ""

        if options.purpose == "rewrite":
            return mock_rewrite_response(latest)
        if options.purpose == "legal_review":
            return mock_legal_review(latest)
        return mock_chat_reply(latest)
