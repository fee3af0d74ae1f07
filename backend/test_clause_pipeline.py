import pytest

import services.clause_pipeline as pipeline
from conftest import StubGenerator
from exceptions import ClauseValidationError, GenerationError
from schemas.lease import ClauseRequest
from services.clause_pipeline import (
    build_legal_review_prompt,
    filter_clauses,
    join_clauses,
    parse_numbered_clauses,
    process_clauses,
    resolve_state,
    rewrite_clauses,
)

REWRITE_RESPONSE = (
    "Here are the clauses:\n"
    "1. Tenant shall pay rent on the 1st.\n"
    "2. No pets allowed.\n"
    "\n"
    "Let me know if you need more."
)


class TestParseNumberedClauses:

    def test_drops_preamble_and_commentary(self):
        assert parse_numbered_clauses(REWRITE_RESPONSE) == [
            "Tenant shall pay rent on the 1st.",
            "No pets allowed.",
        ]

    def test_keeps_response_order_and_multi_digit_numbers(self):
        raw = "10. Tenth clause.\n2. Second clause.\n  11.Eleventh without space  "
        assert parse_numbered_clauses(raw) == ["Tenth clause.", "Second clause.", "Eleventh without space"]

    def test_other_list_styles_are_not_recognized(self):
        raw = "1) Paren style\n- Bullet style\n* Star style\nA. Letter style"
        assert parse_numbered_clauses(raw) == []

    def test_windows_line_endings(self):
        assert parse_numbered_clauses("1. First.\r\n2. Second.\r\n") == ["First.", "Second."]

    def test_only_leading_numbers_are_stripped(self):
        assert parse_numbered_clauses("3. Rent is due within 5. days") == ["Rent is due within 5. days"]

    def test_empty_response(self):
        assert parse_numbered_clauses("") == []


def test_filter_clauses_drops_blank_entries():
    assert filter_clauses(["  ", "Tenant shall pay rent.", "", "\n\t"]) == ["Tenant shall pay rent."]


def test_join_clauses_uses_blank_line():
    assert join_clauses(["A.", "B."]) == "A.\n\nB."


def test_resolve_state_error_lists_valid_states():
    with pytest.raises(ClauseValidationError) as excinfo:
        resolve_state("Not A State")
    error = excinfo.value
    assert error.status_code == 400
    assert error.message.startswith("Invalid state: Not A State. Valid states are: Alabama, Alaska")
    assert error.message.endswith("Wisconsin, Wyoming")
    assert error.to_dict()["normalizedState"] == "not-a-state"


def test_legal_review_prompt_embeds_every_clause_in_order():
    clauses = parse_numbered_clauses(REWRITE_RESPONSE)
    prompt = build_legal_review_prompt("Texas", clauses)
    assert "Texas" in prompt
    assert "Tenant shall pay rent on the 1st.\n\nNo pets allowed." in prompt
    for clause in clauses:
        assert clause in prompt


def test_process_clauses_runs_both_stages():
    stub = StubGenerator(REWRITE_RESPONSE, "All clauses are compliant.")
    request = ClauseRequest(state="  new   york ", clauses=["  ", "tenant pays rent", "no pets"])

    result = process_clauses(request, stub)

    assert result.rewritten_clauses == ["Tenant shall pay rent on the 1st.", "No pets allowed."]
    assert result.legal_analysis == "All clauses are compliant."
    assert len(stub.calls) == 2

    rewrite_prompt, review_prompt = stub.prompts
    assert "tenant pays rent\n\nno pets" in rewrite_prompt
    assert "New York" in review_prompt
    assert "Tenant shall pay rent on the 1st.\n\nNo pets allowed." in review_prompt

    rewrite_options = stub.calls[0]["options"]
    review_options = stub.calls[1]["options"]
    assert rewrite_options.purpose == "rewrite"
    assert review_options.purpose == "legal_review"
    assert "new-york" in review_options.system_prompt
    assert stub.calls[1]["messages"][0]["role"] == "system"


def test_no_valid_clauses_never_calls_generator():
    stub = StubGenerator(REWRITE_RESPONSE, "analysis")
    with pytest.raises(ClauseValidationError, match="At least one valid clause is required"):
        process_clauses(ClauseRequest(state="Ohio", clauses=["", "   "]), stub)
    assert stub.calls == []


def test_invalid_state_checked_before_clauses():
    stub = StubGenerator()
    with pytest.raises(ClauseValidationError, match="Invalid state: Atlantis"):
        process_clauses(ClauseRequest(state="Atlantis", clauses=[]), stub)
    assert stub.calls == []


def test_rewrite_failure_skips_legal_review():
    stub = StubGenerator(GenerationError("service unavailable"), "analysis")
    with pytest.raises(GenerationError, match="service unavailable"):
        process_clauses(ClauseRequest(state="Ohio", clauses=["No smoking."]), stub)
    assert len(stub.calls) == 1


def test_legal_review_failure_propagates():
    stub = StubGenerator(REWRITE_RESPONSE, GenerationError("timed out"))
    with pytest.raises(GenerationError, match="timed out"):
        process_clauses(ClauseRequest(state="Ohio", clauses=["No smoking."]), stub)
    assert len(stub.calls) == 2


def test_unparseable_rewrite_passes_through_empty(caplog):
    stub = StubGenerator("Sure! Here you go:\n- No smoking.", "Nothing to review.")
    result = process_clauses(ClauseRequest(state="Ohio", clauses=["No smoking."]), stub)
    assert result.rewritten_clauses == []
    assert result.legal_analysis == "Nothing to review."
    assert "no numbered clauses" in caplog.text


def test_strict_parsing_rejects_unparseable_rewrite(monkeypatch):
    monkeypatch.setattr(pipeline, "STRICT_CLAUSE_PARSING", True)
    stub = StubGenerator("- No smoking.", "analysis")
    with pytest.raises(GenerationError, match="no numbered clauses"):
        rewrite_clauses("No smoking.", stub)
    assert len(stub.calls) == 1


def test_generation_is_not_retried_by_default():
    stub = StubGenerator(GenerationError("flaky"), REWRITE_RESPONSE)
    with pytest.raises(GenerationError):
        rewrite_clauses("No smoking.", stub)
    assert len(stub.calls) == 1


def test_bounded_retry_when_enabled(monkeypatch):
    monkeypatch.setattr(pipeline, "LLM_MAX_ATTEMPTS", 3)
    monkeypatch.setattr(pipeline, "LLM_RETRY_BACKOFF_SECONDS", 0)

    stub = StubGenerator(GenerationError("flaky"), REWRITE_RESPONSE)
    assert rewrite_clauses("No smoking.", stub) == ["Tenant shall pay rent on the 1st.", "No pets allowed."]
    assert len(stub.calls) == 2

    stub = StubGenerator(*[GenerationError("down")] * 3, REWRITE_RESPONSE)
    with pytest.raises(GenerationError, match="down"):
        rewrite_clauses("No smoking.", stub)
    assert len(stub.calls) == 3
