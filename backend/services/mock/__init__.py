from services.mock.clauses import mock_rewrite_response, mock_legal_review
from services.mock.chat import mock_chat_reply
from services.mock.generator import MockGenerator

__all__ = [
    "mock_rewrite_response",
    "mock_legal_review",
    "mock_chat_reply",
    "MockGenerator",
]
