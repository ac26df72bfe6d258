"""
app/services/providers.py

Placeholder enrichment lookups. Each one takes the CampaignInput and returns a
JSON-serializable dict in the shape the real data source will produce; values
that need an external provider (census, Google Trends, Meta, weather, ad
benchmarks, calendars) are left empty. Replace a function with a real
integration by keeping the signature:

    async def lookup(campaign: CampaignInput) -> Dict[str, Any]

Lookups must not modify the input and may raise; the orchestrator guards
every call.
"""

from typing import Any, Dict

from app.schemas.campaign_input import CampaignInput

def _present(*values: Any) -> list:
    return [v for v in values if v]

async def get_demographics(campaign: CampaignInput) -> Dict[str, Any]:
    target = campaign.target
    return {
        "marketSize": {
            "totalPopulation": campaign.metrics.goals.store_visits or "",
            "targetPopulation": "",
            "growthRate": "",
            "householdData": {"avgSize": "", "income": target.income},
        },
        "income": {"median": "", "brackets": {target.income: ""}},
        "relationships": {"coupled": "", "single": ""},
        "ageGroups": {
            target.age: "",
            "mediaPreferences": {"social": "", "search": "", "display": ""},
        },
    }

async def get_search_trends(campaign: CampaignInput) -> Dict[str, Any]:
    return {
        "relatedQueries": _present(campaign.product, campaign.location),
        "interestOverTime": [
            {"date": campaign.timing.start, "value": campaign.metrics.ctr or ""}
        ],
        "geoTargets": _present(campaign.location),
    }

async def get_social_media_stats(campaign: CampaignInput) -> Dict[str, Any]:
    return {
        "meta": {
            "audienceSize": campaign.metrics.goals.store_visits or "",
            "interests": [campaign.target.type],
            "peakHours": [],
        },
        "instagram": {
            "hashtags": _present(campaign.product, campaign.location),
            "engagementRate": campaign.metrics.ctr or "",
        },
    }

async def get_weather_data(campaign: CampaignInput) -> Dict[str, Any]:
    return {
        "forecast": [],
        "shoppingImpact": campaign.location,
        "contingencyDates": [campaign.timing.end],
    }

async def get_ad_platform_data(campaign: CampaignInput) -> Dict[str, Any]:
    metrics = campaign.metrics
    return {
        "cpc": {"meta": metrics.cpc or "", "google": metrics.cpc or ""},
        "conversion": {"meta": metrics.ctr or "", "google": metrics.ctr or ""},
        "seasonalMultiplier": "",
        "recommendedBudget": {"daily": metrics.goals.total_sales or ""},
    }

async def get_calendar_events(campaign: CampaignInput) -> Dict[str, Any]:
    return {
        "mainEvent": campaign.timing.start,
        "related": [],
        "commercial": _present(campaign.location),
        "competitor": list(campaign.platforms.preferred),
    }
