from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Any

from app.schemas.parsed_report import ParsedReport
from app.schemas.survey import NormalizedSurvey

class EnrichmentResult(BaseModel):
    demographics: Dict[str, Any] = Field(default_factory=dict)
    trends: List[Dict[str, Any]] = Field(default_factory=list)
    benchmarks: Dict[str, Any] = Field(default_factory=dict)
    events: Dict[str, Any] = Field(default_factory=dict)

class EnrichResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enriched_data: EnrichmentResult
    initial_parse: ParsedReport = Field(alias="initialParse")
    follow_up_parse: NormalizedSurvey = Field(alias="followUpParse")
    message: str = "Data enrichment complete"

class ErrorResponse(BaseModel):
    error: str
    parsed_input: Dict[str, Any] = Field(default_factory=dict)
    enriched_data: Dict[str, Any] = Field(default_factory=dict)
