"""
app/services/survey_normalizer.py

Maps the follow-up survey JSON onto NormalizedSurvey. The survey comes from a
language model, so any field may be missing, null or the wrong type, and the
whole document may not parse at all. Every read goes through `dig` and one of
the `as_*` coercers, which return the field's default instead of raising.

A malformed number becomes 0, which is indistinguishable from a real 0.
"""

import json
import logging
import re
from typing import Any, List, Mapping, Optional

from app.schemas.survey import (
    Assets,
    BudgetSplit,
    Competition,
    Goals,
    Historical,
    HistoricalMetrics,
    NormalizedSurvey,
    Objectives,
    PeakDates,
    Platforms,
    SalesSplit,
    Targeting,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# ---- Accessors ----
def dig(data: Any, *path: str) -> Any:
    """Walk nested mappings; None as soon as a step is missing or not a mapping."""
    current = data
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current

def as_int(value: Any) -> int:
    # leading-integer parse: "25%" -> 25, 12.9 -> 12, "abc" -> 0
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else 0
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group()) if match else 0
    return 0

def as_float(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        value = float(value)
        return value if value == value and abs(value) != float("inf") else 0.0
    if isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        return float(match.group()) if match else 0.0
    return 0.0

def as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""

def as_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [as_text(item) for item in value if as_text(item)]


# ---- Section builders ----
def _peak_dates(raw: Any) -> PeakDates:
    full = as_text(raw)
    if "-" not in full:
        return PeakDates(full=full)
    parts = full.split("-")
    return PeakDates(full=full, start=parts[0].strip(), end=parts[1].strip())

def _objectives(data: Any) -> Objectives:
    return Objectives(
        growth=as_int(dig(data, "objectives", "growth_target")),
        channels=as_list(dig(data, "objectives", "channels")),
    )

def _competition(data: Any) -> Competition:
    return Competition(
        count=as_int(dig(data, "competition", "number_of_competitors")),
        type=as_text(dig(data, "competition", "competitor_type")),
        platforms=as_list(dig(data, "competition", "competitor_channels")),
    )

def _platforms(data: Any) -> Platforms:
    preferred = as_list(dig(data, "platforms", "primary_channels")) + as_list(
        dig(data, "platforms", "secondary_channels")
    )
    return Platforms(
        preferred=preferred,
        budget=BudgetSplit(
            meta_google=as_int(dig(data, "platforms", "budget_split", "meta_google")),
            radio=as_int(dig(data, "platforms", "budget_split", "radio")),
        ),
    )

def _historical(data: Any) -> Historical:
    return Historical(
        peak_dates=_peak_dates(dig(data, "historical", "peak_period")),
        avg_order=as_float(dig(data, "historical", "average_order_value")),
        metrics=HistoricalMetrics(
            ctr=as_float(dig(data, "historical", "facebook_metrics", "ctr")),
            cpc=as_float(dig(data, "historical", "facebook_metrics", "cpc")),
            best_format=as_text(dig(data, "historical", "facebook_metrics", "best_format")),
        ),
    )

def _targeting(data: Any) -> Targeting:
    return Targeting(
        income=as_text(dig(data, "targeting", "household_income")),
        type=as_text(dig(data, "targeting", "customer_type")),
    )

def _assets(data: Any) -> Assets:
    return Assets(
        existing=as_list(dig(data, "assets", "available")),
        needed=as_list(dig(data, "assets", "needed")),
        budget=as_float(dig(data, "assets", "video_budget")),
    )

def _goals(data: Any) -> Goals:
    return Goals(
        store_visits=as_int(dig(data, "goals", "store_visits")),
        total_sales=as_float(dig(data, "goals", "total_sales")),
        split=SalesSplit(
            in_store=as_int(dig(data, "goals", "sales_split", "in_store")),
            online=as_int(dig(data, "goals", "sales_split", "online")),
        ),
    )


# ---- Public API ----
def load_survey_json(json_text: Optional[str]) -> Any:
    """Decode the survey text; None when it is absent or not valid JSON."""
    if not isinstance(json_text, (str, bytes)) or not json_text:
        return None
    try:
        return json.loads(json_text)
    except ValueError as exc:
        logger.debug("Follow-up survey is not valid JSON: %s", exc)
        return None

def normalize_survey(data: Any) -> NormalizedSurvey:
    if not isinstance(data, Mapping):
        return NormalizedSurvey()
    return NormalizedSurvey(
        objectives=_objectives(data),
        competition=_competition(data),
        platforms=_platforms(data),
        historical=_historical(data),
        targeting=_targeting(data),
        assets=_assets(data),
        goals=_goals(data),
    )

def parse_survey(json_text: Optional[str]) -> NormalizedSurvey:
    """Decode and normalize the follow-up survey; always fully populated."""
    return normalize_survey(load_survey_json(json_text))
