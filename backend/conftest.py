import pytest
from fastapi.testclient import TestClient

from exceptions import GenerationError
from main import app
from services.llm import TextGenerator, get_generator


class StubGenerator(TextGenerator):
    """Returns queued responses in order and records every prompt it was given"""

    source = "openai"

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def complete(self, messages, options=None):
        self.calls.append({"messages": messages, "options": options})
        if not self.responses:
            raise GenerationError("No stubbed response left")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def prompts(self):
        return [call["messages"][-1]["content"] for call in self.calls]


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def use_generator():
    """Install a StubGenerator as the clause pipeline's generator"""

    def install(*responses):
        stub = StubGenerator(*responses)
        app.dependency_overrides[get_generator] = lambda: stub
        return stub

    yield install
    app.dependency_overrides.clear()
