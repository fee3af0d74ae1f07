"""Lease clause rewrite and legal review pipeline.

normalize state -> filter clauses -> rewrite (numbered list) -> parse ->
legal review. Stages run in order and the first failure aborts the rest.
"""
import logging
import re
import time

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from config import (
    OPENAI_MODEL,
    REWRITE_TEMPERATURE,
    LEGAL_REVIEW_TEMPERATURE,
    MAX_COMPLETION_TOKENS,
    LLM_MAX_ATTEMPTS,
    LLM_RETRY_BACKOFF_SECONDS,
    STRICT_CLAUSE_PARSING,
)
from data.states import US_STATES
from exceptions import ClauseValidationError, GenerationError
from prompts.lease import CLAUSE_REWRITE_PROMPT, LEGAL_REVIEW_PROMPT, LEGAL_REVIEW_SYSTEM_PROMPT
from schemas.lease import ClauseRequest, PipelineResult
from services.llm import GenerationOptions, TextGenerator
from services.states import normalization_key, normalize_state

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = "\n\n"
NO_VALID_CLAUSES = "At least one valid clause is required"

_NUMBERED_ITEM = re.compile(r"^\d+\.")
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")

REWRITE_OPTIONS = GenerationOptions(
    model=OPENAI_MODEL,
    temperature=REWRITE_TEMPERATURE,
    max_output_tokens=MAX_COMPLETION_TOKENS,
    purpose="rewrite",
)


def resolve_state(state: str) -> str:
    """Canonical state name, or ClauseValidationError naming the valid set"""
    canonical = normalize_state(state)
    if canonical is None:
        raise ClauseValidationError(
            f"Invalid state: {state}. Valid states are: {', '.join(US_STATES)}",
            normalizedState=normalization_key(state),
        )
    return canonical


def filter_clauses(clauses: list[str]) -> list[str]:
    return [clause for clause in clauses if clause.strip()]


def join_clauses(clauses: list[str]) -> str:
    return CLAUSE_SEPARATOR.join(clauses)


def parse_numbered_clauses(raw: str) -> list[str]:
    """Pull "N. text" items out of a model response.

    Only lines that start with digits and a period (after trimming) count;
    preambles, blank lines and trailing commentary are dropped. Order is
    kept as it appears in the response.
    """
    clauses = []
    for line in raw.split("\n"):
        stripped = line.strip()
        if _NUMBERED_ITEM.match(stripped):
            clauses.append(_NUMBER_PREFIX.sub("", stripped).strip())
    return clauses


def build_rewrite_prompt(joined_clauses: str) -> str:
    return CLAUSE_REWRITE_PROMPT.replace("<<CLAUSES>>", joined_clauses)


def build_legal_review_prompt(state: str, clauses: list[str]) -> str:
    prompt = LEGAL_REVIEW_PROMPT.replace("<<STATE>>", state)
    return prompt.replace("<<CLAUSES>>", join_clauses(clauses))


def _generate(generator: TextGenerator, prompt: str, options: GenerationOptions) -> str:
    """One generation call, retried on GenerationError up to LLM_MAX_ATTEMPTS"""
    for attempt in Retrying(
        stop=stop_after_attempt(LLM_MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=LLM_RETRY_BACKOFF_SECONDS, max=10),
        retry=retry_if_exception_type(GenerationError),
        reraise=True,
    ):
        with attempt:
            if attempt.retry_state.attempt_number > 1:
                logger.info("Retrying %s generation (attempt %d)", options.purpose, attempt.retry_state.attempt_number)
            return generator.generate(prompt, options)


def rewrite_clauses(joined_clauses: str, generator: TextGenerator) -> list[str]:
    raw = _generate(generator, build_rewrite_prompt(joined_clauses), REWRITE_OPTIONS)
    rewritten = parse_numbered_clauses(raw)

    if not rewritten and raw.strip():
        # The model ignored the numbered-list format; nothing could be parsed
        if STRICT_CLAUSE_PARSING:
            raise GenerationError("Rewrite response contained no numbered clauses")
        logger.warning("Rewrite response had no numbered clauses (%d chars discarded)", len(raw))
    return rewritten


def review_legality(state: str, rewritten_clauses: list[str], generator: TextGenerator) -> str:
    options = GenerationOptions(
        model=OPENAI_MODEL,
        temperature=LEGAL_REVIEW_TEMPERATURE,
        max_output_tokens=MAX_COMPLETION_TOKENS,
        system_prompt=LEGAL_REVIEW_SYSTEM_PROMPT.replace("<<JURISDICTION>>", normalization_key(state)),
        purpose="legal_review",
    )
    return _generate(generator, build_legal_review_prompt(state, rewritten_clauses), options)


def process_clauses(request: ClauseRequest, generator: TextGenerator) -> PipelineResult:
    started = time.time()

    state = resolve_state(request.state)

    valid_clauses = filter_clauses(request.clauses)
    if not valid_clauses:
        logger.info("Rejected clause request for %s: no non-empty clauses", state)
        raise ClauseValidationError(NO_VALID_CLAUSES)

    # Step 1: Rewrite clauses
    rewritten = rewrite_clauses(join_clauses(valid_clauses), generator)

    # Step 2: Legal review of the rewritten clauses
    analysis = review_legality(state, rewritten, generator)

    logger.info(
        "Processed %d clauses for %s -> %d rewritten in %d ms",
        len(valid_clauses), state, len(rewritten), int((time.time() - started) * 1000),
    )
    return PipelineResult(rewritten_clauses=rewritten, legal_analysis=analysis)
