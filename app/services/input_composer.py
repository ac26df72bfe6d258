"""
app/services/input_composer.py

Merges the parsed report and the normalized survey into the CampaignInput
every enrichment producer receives. Pure: no I/O, same inputs give the same
record.
"""

from typing import Tuple

from app.schemas.campaign_input import CampaignInput, CampaignMetrics, TargetAudience, Timing
from app.schemas.parsed_report import ParsedReport
from app.schemas.survey import NormalizedSurvey

DEFAULT_INDUSTRY = "retail"

def split_target(raw: str) -> Tuple[str, str]:
    """
    "female, 25-34" -> ("female", "25-34"). Missing parts come back empty;
    anything after the second comma is dropped.
    """
    parts = (raw or "").split(",")
    gender = parts[0].strip()
    age = parts[1].strip() if len(parts) > 1 else ""
    return gender, age

def compose_input(parsed: ParsedReport, survey: NormalizedSurvey) -> CampaignInput:
    confirmed = parsed.data.confirmed
    gender, age = split_target(confirmed.get("target", ""))
    historical = survey.historical

    return CampaignInput(
        location=confirmed.get("location", ""),
        target=TargetAudience(
            age=age,
            gender=gender,
            income=survey.targeting.income,
            type=survey.targeting.type,
        ),
        timing=Timing(
            start=historical.peak_dates.start,
            end=historical.peak_dates.end,
        ),
        product=confirmed.get("product", ""),
        industry=confirmed.get("industry") or DEFAULT_INDUSTRY,
        metrics=CampaignMetrics(
            ctr=historical.metrics.ctr,
            cpc=historical.metrics.cpc,
            best_format=historical.metrics.best_format,
            goals=survey.goals,
        ),
        platforms=survey.platforms,
    )
