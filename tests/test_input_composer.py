import pydantic
import pytest

from app.schemas.parsed_report import ParsedReport, ReportSections
from app.schemas.survey import NormalizedSurvey
from app.services.input_composer import compose_input, split_target
from app.services.report_parser import parse_report
from app.services.survey_normalizer import parse_survey


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("female, 25-34", ("female", "25-34")),
        (" male ,18-24 , extra", ("male", "18-24")),
        ("everyone", ("everyone", "")),
        ("", ("", "")),
        (None, ("", "")),
    ],
)
def test_split_target(raw, expected):
    assert split_target(raw) == expected


@pytest.mark.unit
def test_compose_merges_report_and_survey(report_text, survey_json):
    campaign = compose_input(parse_report(report_text), parse_survey(survey_json))

    assert campaign.location == "Austin"
    assert campaign.product == "Running Shoes"
    assert campaign.industry == "Sporting Goods"
    assert (campaign.target.gender, campaign.target.age) == ("female", "25-34")
    assert campaign.target.income == "75k-100k"
    assert campaign.target.type == "in a relationship"
    assert (campaign.timing.start, campaign.timing.end) == ("June", "August")
    assert campaign.metrics.ctr == 1.8
    assert campaign.metrics.cpc == 0.45
    assert campaign.metrics.best_format == "video"
    assert campaign.metrics.goals.store_visits == 500
    assert campaign.platforms.preferred == ("meta", "radio")


@pytest.mark.unit
def test_industry_defaults_to_retail():
    campaign = compose_input(ParsedReport(), NormalizedSurvey())

    assert campaign.industry == "retail"
    assert campaign.location == ""
    assert campaign.target.age == ""


@pytest.mark.unit
def test_metrics_dump_carries_goals():
    parsed = ParsedReport(data=ReportSections(confirmed={"target": "female"}))
    campaign = compose_input(parsed, parse_survey('{"goals": {"total_sales": "1000"}}'))

    metrics = campaign.model_dump(by_alias=True)["metrics"]
    assert set(metrics) == {"ctr", "cpc", "bestFormat", "goals"}
    assert metrics["goals"]["totalSales"] == 1000.0


@pytest.mark.unit
def test_compose_is_deterministic(report_text, survey_json):
    parsed = parse_report(report_text)
    survey = parse_survey(survey_json)

    assert compose_input(parsed, survey) == compose_input(parsed, survey)


@pytest.mark.unit
def test_campaign_input_is_immutable():
    campaign = compose_input(ParsedReport(), NormalizedSurvey())

    with pytest.raises(pydantic.ValidationError):
        campaign.location = "Paris"
