from pydantic import BaseModel, Field
from typing import Dict, List

class ReportSections(BaseModel):
    confirmed: Dict[str, str] = Field(default_factory=dict)
    missing: List[str] = Field(default_factory=list)
    questions: List[str] = Field(default_factory=list)

class ParsedReport(BaseModel):
    display: str = ""
    data: ReportSections = Field(default_factory=ReportSections)
