"""
app/services/enrichment.py

Orchestration for campaign data enrichment.

A request carries two artifacts from the intake model: the free-text report
and the follow-up survey JSON. They are parsed, merged into one CampaignInput
and handed to the enrichment producers. Demographics, ad benchmarks and
calendar events run one after another; the trend-class producers (search,
social, weather) run concurrently and only their successful results are kept.

Every producer call goes through `safely`, so a failing, slow or empty data
source is replaced by a fallback and never aborts the response. The only
error that reaches the caller is an outer payload that cannot be decoded.

This module exposes `run_enrichment(report_text, survey_json)` for the core
flow and `handle_event(event)` for the request/response adaptation.
"""

import asyncio
import functools
import inspect
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from app.config import EnrichmentSettings, get_settings
from app.schemas.campaign_input import CampaignInput
from app.schemas.enrich_response import EnrichmentResult, EnrichResponse, ErrorResponse
from app.schemas.parsed_report import ParsedReport
from app.schemas.survey import NormalizedSurvey
from app.services import providers
from app.services.errors import PayloadError
from app.services.input_composer import compose_input
from app.services.report_parser import parse_report
from app.services.survey_normalizer import parse_survey

logger = logging.getLogger(__name__)

Producer = Callable[[CampaignInput], Awaitable[Dict[str, Any]]]

SUCCESS_MESSAGE = "Data enrichment complete"
REPORT_FIELD = "ai_parse_user_input_"
SURVEY_FIELD = "parsed_follow_up_user_input"

_EMPTY = object()
_FAILED = object()
_RESULT_ADAPTER = TypeAdapter(Dict[str, Any])


@dataclass(frozen=True)
class ProducerSet:
    demographics: Producer
    trends: Tuple[Producer, ...]
    benchmarks: Producer
    events: Producer


DEFAULT_PRODUCERS = ProducerSet(
    demographics=providers.get_demographics,
    trends=(
        providers.get_search_trends,
        providers.get_social_media_stats,
        providers.get_weather_data,
    ),
    benchmarks=providers.get_ad_platform_data,
    events=providers.get_calendar_events,
)


@dataclass(frozen=True)
class EnrichmentOutcome:
    enriched: EnrichmentResult
    initial_parse: ParsedReport
    follow_up_parse: NormalizedSurvey
    campaign_input: CampaignInput

    def to_response(self) -> EnrichResponse:
        return EnrichResponse(
            enriched_data=self.enriched,
            initial_parse=self.initial_parse,
            follow_up_parse=self.follow_up_parse,
            message=SUCCESS_MESSAGE,
        )


# ---- Guarded calls ----
async def safely(
    fn: Callable[[], Any],
    fallback: Any = _EMPTY,
    timeout: Optional[float] = None,
    name: Optional[str] = None,
) -> Any:
    """
    Run `fn` and return its result, or `fallback` when it raises, misses the
    deadline or produces a falsy value. `fn` may return a plain value or an
    awaitable. The fallback defaults to a fresh empty dict.
    """
    if fallback is _EMPTY:
        fallback = {}
    label = name or getattr(fn, "__name__", "producer")
    try:
        result = fn()
        if inspect.isawaitable(result):
            if timeout is not None:
                result = await asyncio.wait_for(result, timeout)
            else:
                result = await result
    except asyncio.TimeoutError:
        logger.warning("%s did not finish within %ss; using fallback", label, timeout)
        return fallback
    except Exception as exc:
        logger.warning("%s failed; using fallback: %r", label, exc)
        return fallback
    if not result:
        logger.debug("%s returned nothing; using fallback", label)
        return fallback
    return result

def _producer_name(producer: Producer) -> str:
    return getattr(producer, "__name__", type(producer).__name__)

async def _lookup(
    producer: Producer,
    campaign: CampaignInput,
    timeout: Optional[float],
    fallback: Any = _EMPTY,
) -> Any:
    """
    Guarded producer call. The result must be a mapping that serializes to
    JSON; it comes back as plain JSON data (keys as strings). Anything else
    counts as the producer failing.
    """
    name = _producer_name(producer)
    if fallback is _EMPTY:
        fallback = {}
    result = await safely(functools.partial(producer, campaign), _FAILED, timeout, name)
    if result is _FAILED:
        return fallback
    try:
        if not isinstance(result, Mapping):
            raise TypeError(f"expected a mapping, got {type(result).__name__}")
        return _RESULT_ADAPTER.validate_python(to_jsonable_python(result))
    except (TypeError, ValueError) as exc:
        logger.warning("%s returned an unusable result; using fallback: %s", name, exc)
        return fallback


# ---- Core flow ----
def _prepare(report_text: Any, survey_json: Any) -> Tuple[ParsedReport, NormalizedSurvey, CampaignInput]:
    try:
        initial_parse = parse_report(report_text)
    except Exception:
        logger.exception("Report parsing failed; continuing with an empty report")
        initial_parse = ParsedReport()
    try:
        follow_up_parse = parse_survey(survey_json)
    except Exception:
        logger.exception("Survey normalization failed; continuing with defaults")
        follow_up_parse = NormalizedSurvey()
    try:
        campaign = compose_input(initial_parse, follow_up_parse)
    except Exception:
        logger.exception("Composing the campaign input failed; continuing with defaults")
        campaign = CampaignInput()
    return initial_parse, follow_up_parse, campaign

async def run_enrichment(
    report_text: Any,
    survey_json: Any,
    producers: Optional[ProducerSet] = None,
    settings: Optional[EnrichmentSettings] = None,
) -> EnrichmentOutcome:
    """
    Parse both artifacts, compose the CampaignInput and run every producer.
    Never raises: parse failures fall back to empty defaults and producer
    failures to their fallback values.
    """
    producers = producers or DEFAULT_PRODUCERS
    settings = settings or get_settings()
    timeout = settings.producer_timeout_seconds

    initial_parse, follow_up_parse, campaign = _prepare(report_text, survey_json)

    demographics = await _lookup(producers.demographics, campaign, timeout)

    settled = await asyncio.gather(
        *(_lookup(producer, campaign, timeout, fallback=None) for producer in producers.trends),
        return_exceptions=True,
    )
    trends = [r for r in settled if r is not None and not isinstance(r, BaseException)]
    if len(trends) < len(producers.trends):
        logger.info("%d of %d trend producers dropped", len(producers.trends) - len(trends), len(producers.trends))

    benchmarks = await _lookup(producers.benchmarks, campaign, timeout)
    events = await _lookup(producers.events, campaign, timeout)

    enriched = EnrichmentResult(
        demographics=demographics,
        trends=trends,
        benchmarks=benchmarks,
        events=events,
    )
    return EnrichmentOutcome(
        enriched=enriched,
        initial_parse=initial_parse,
        follow_up_parse=follow_up_parse,
        campaign_input=campaign,
    )


# ---- Request adaptation ----
def decode_context(event: Any) -> Dict[str, Any]:
    """
    Pull the agent context out of an event shaped like {"body": "<json>"}.
    A missing body or context is treated as empty; a body that is not a JSON
    object raises PayloadError.
    """
    body = event.get("body") if isinstance(event, Mapping) else None
    if not body:
        return {}
    try:
        decoded = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise PayloadError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(decoded, dict):
        raise PayloadError("Request body must be a JSON object")
    context = decoded.get("context")
    return dict(context) if isinstance(context, Mapping) else {}

async def handle_event(
    event: Any,
    producers: Optional[ProducerSet] = None,
    settings: Optional[EnrichmentSettings] = None,
) -> Tuple[int, Dict[str, Any]]:
    """Returns (status_code, json_body) for the event."""
    try:
        context = decode_context(event)
        outcome = await run_enrichment(
            context.get(REPORT_FIELD),
            context.get(SURVEY_FIELD),
            producers=producers,
            settings=settings,
        )
        return 200, outcome.to_response().model_dump(by_alias=True, mode="json")
    except Exception as exc:
        logger.error("Enrichment request failed: %s", exc)
        error = ErrorResponse(error=str(exc) or "Internal server error")
        return 500, error.model_dump(mode="json")
