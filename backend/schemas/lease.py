from pydantic import BaseModel, ConfigDict, Field


class ClauseRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    state: str
    clauses: list[str]


class PipelineResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rewritten_clauses: list[str] = Field(alias="rewrittenClauses")
    legal_analysis: str = Field(alias="legalAnalysis")
