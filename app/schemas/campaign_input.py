from pydantic import BaseModel, ConfigDict, Field

from app.schemas.survey import Goals, Platforms

class TargetAudience(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: str = ""
    gender: str = ""
    income: str = ""
    type: str = ""

class Timing(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: str = ""
    end: str = ""

class CampaignMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ctr: float = 0.0
    cpc: float = 0.0
    best_format: str = Field(default="", alias="bestFormat")
    goals: Goals = Field(default_factory=Goals)

class CampaignInput(BaseModel):
    """Canonical record every enrichment producer receives. Immutable."""
    model_config = ConfigDict(frozen=True)

    location: str = ""
    target: TargetAudience = Field(default_factory=TargetAudience)
    timing: Timing = Field(default_factory=Timing)
    product: str = ""
    industry: str = "retail"
    metrics: CampaignMetrics = Field(default_factory=CampaignMetrics)
    platforms: Platforms = Field(default_factory=Platforms)
