"""
Deterministic strategy generator

Builds a complete CampaignStrategy from the static catalog and a validated
CampaignInput. Used directly when no model credential is configured and as
the fallback whenever the model path fails.
"""

import logging

from ads_strategist.core.domain import catalog
from ads_strategist.core.domain.budget import build_budget_plan
from ads_strategist.core.domain.copywriting import (
    build_ad_copy, describe_targeting, select_business_template
)
from ads_strategist.core.domain.entities import (
    AdFormats, CampaignInput, CampaignObjective, CampaignStrategy, FunnelStage, ScheduleDay
)

logger = logging.getLogger(__name__)

def generate(campaign_input: CampaignInput) -> CampaignStrategy:
    """Generate a template strategy; same input always yields the same strategy"""
    template = select_business_template(
        campaign_input.business_type, campaign_input.product_description
    )

    logger.debug("Generating template strategy", extra={
        "business_type": campaign_input.business_type,
        "known_business_type": campaign_input.business_type in catalog.BUSINESS_TEMPLATES,
        "budget_period": campaign_input.budget_period
    })

    schedule = [ScheduleDay.from_dict(entry) for entry in catalog.CAMPAIGN_SCHEDULE]
    schedule[0].targeting = describe_targeting(campaign_input.target_audience)

    return CampaignStrategy(
        funnel_strategy=[FunnelStage.from_dict(s) for s in catalog.FUNNEL_STAGES],
        campaign_objectives=[CampaignObjective.from_dict(o) for o in catalog.CAMPAIGN_OBJECTIVES],
        ad_formats=AdFormats.from_dict(catalog.AD_FORMATS),
        ad_copy=build_ad_copy(campaign_input, template),
        budget_plan=build_budget_plan(campaign_input.budget_amount, campaign_input.budget_period),
        campaign_schedule=schedule
    )
