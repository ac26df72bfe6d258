"""
Shared fixtures: a realistic intake report, a follow-up survey and helpers
for building producer sets.
"""

import json

import pytest

from app.config import EnrichmentSettings


REPORT_TEXT = """Here is what I gathered.### Confirmed Details
- Location: Austin
- Product: Running Shoes
- Industry: Sporting Goods
- Target: female, 25-34
### Missing Critical Info
- Campaign budget
- Launch date
### Follow-up Questions
1. What is the budget?
2. Who is the audience?
"""

SURVEY = {
    "objectives": {"growth_target": "20%", "channels": ["meta", "google"]},
    "competition": {
        "number_of_competitors": 3,
        "competitor_type": "local",
        "competitor_channels": ["instagram"],
    },
    "platforms": {
        "primary_channels": ["meta"],
        "secondary_channels": ["radio"],
        "budget_split": {"meta_google": "70", "radio": 30},
    },
    "historical": {
        "peak_period": "June-August",
        "average_order_value": 85.5,
        "facebook_metrics": {"ctr": "1.8%", "cpc": 0.45, "best_format": "video"},
    },
    "targeting": {"household_income": "75k-100k", "customer_type": "in a relationship"},
    "assets": {"available": ["logo"], "needed": ["video"], "video_budget": 2000},
    "goals": {
        "store_visits": 500,
        "total_sales": 25000,
        "sales_split": {"in_store": "60", "online": "40"},
    },
}


@pytest.fixture
def report_text() -> str:
    return REPORT_TEXT


@pytest.fixture
def survey_json() -> str:
    return json.dumps(SURVEY)


@pytest.fixture
def settings() -> EnrichmentSettings:
    return EnrichmentSettings(producer_timeout_seconds=0.5)


@pytest.fixture
def event(report_text, survey_json) -> dict:
    body = {
        "context": {
            "ai_parse_user_input_": report_text,
            "parsed_follow_up_user_input": survey_json,
        }
    }
    return {"body": json.dumps(body)}
