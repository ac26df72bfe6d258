"""
Normalized follow-up survey.

Every field has a default so an empty or unparsable survey still produces the
full shape. Field aliases carry the camelCase names used on the wire; dump
with ``by_alias=True``.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Tuple


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Objectives(_Frozen):
    growth: int = 0
    channels: Tuple[str, ...] = ()

class Competition(_Frozen):
    count: int = 0
    type: str = ""
    platforms: Tuple[str, ...] = ()

class BudgetSplit(_Frozen):
    meta_google: int = 0
    radio: int = 0

class Platforms(_Frozen):
    preferred: Tuple[str, ...] = ()
    budget: BudgetSplit = Field(default_factory=BudgetSplit)

class PeakDates(_Frozen):
    full: str = ""
    start: str = ""
    end: str = ""

class HistoricalMetrics(_Frozen):
    ctr: float = 0.0
    cpc: float = 0.0
    best_format: str = Field(default="", alias="bestFormat")

class Historical(_Frozen):
    peak_dates: PeakDates = Field(default_factory=PeakDates, alias="peakDates")
    avg_order: float = Field(default=0.0, alias="avgOrder")
    metrics: HistoricalMetrics = Field(default_factory=HistoricalMetrics)

class Targeting(_Frozen):
    income: str = ""
    type: str = ""

class Assets(_Frozen):
    existing: Tuple[str, ...] = ()
    needed: Tuple[str, ...] = ()
    budget: float = 0.0

class SalesSplit(_Frozen):
    in_store: int = Field(default=0, alias="inStore")
    online: int = 0

class Goals(_Frozen):
    store_visits: int = Field(default=0, alias="storeVisits")
    total_sales: float = Field(default=0.0, alias="totalSales")
    split: SalesSplit = Field(default_factory=SalesSplit)

class NormalizedSurvey(_Frozen):
    objectives: Objectives = Field(default_factory=Objectives)
    competition: Competition = Field(default_factory=Competition)
    platforms: Platforms = Field(default_factory=Platforms)
    historical: Historical = Field(default_factory=Historical)
    targeting: Targeting = Field(default_factory=Targeting)
    assets: Assets = Field(default_factory=Assets)
    goals: Goals = Field(default_factory=Goals)
