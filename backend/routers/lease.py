import logging

from fastapi import APIRouter, Depends, Response

from exceptions import APIError
from schemas.common import ErrorResponse
from schemas.lease import ClauseRequest, PipelineResult
from services.clause_pipeline import process_clauses
from services.llm import TextGenerator, get_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lease"])

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@router.post(
    "/lease",
    response_model=PipelineResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def process_lease_clauses(input: ClauseRequest, generator: TextGenerator = Depends(get_generator)):
    """Rewrite lease clauses and review them for legality in the given state"""
    try:
        return process_clauses(input, generator)
    except APIError:
        raise
    except Exception as e:
        logger.exception("Clause processing error")
        raise APIError(str(e) or "Unknown error") from e


@router.options("/lease")
def lease_preflight():
    return Response(headers=PREFLIGHT_HEADERS)
