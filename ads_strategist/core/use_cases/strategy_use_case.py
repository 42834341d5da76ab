import logging
from typing import Any, Dict, Optional
from ads_strategist.core.domain.entities import GeneratedStrategy
from ads_strategist.core.domain.errors import UpstreamError
from ads_strategist.core.domain.generator import generate
from ads_strategist.core.domain.validation import parse_campaign_input
from ads_strategist.core.ports.inbound import StrategyUseCasePort
from ads_strategist.core.ports.outbound import StrategyModelPort

logger = logging.getLogger(__name__)

SOURCE_MODEL = "model"
SOURCE_TEMPLATE = "template"

class GenerateStrategyUseCase(StrategyUseCasePort):
    """Use case for producing a campaign strategy, model first, template as fallback"""

    def __init__(self, model_service: Optional[StrategyModelPort] = None):
        self.model_service = model_service

    async def generate_strategy(self, payload: Dict[str, Any]) -> GeneratedStrategy:
        """Generate a strategy for a raw form submission"""

        # Step 1: Validate input (ValidationError propagates to the caller)
        campaign_input = parse_campaign_input(payload)

        logger.info("Starting strategy generation", extra={
            "business_type": campaign_input.business_type,
            "campaign_goal": campaign_input.campaign_goal,
            "budget_period": campaign_input.budget_period,
            "model_configured": self.model_service is not None
        })

        # Step 2: Template path when no model credential is configured
        if self.model_service is None:
            logger.info("No model configured, using template strategy")
            return GeneratedStrategy(strategy=generate(campaign_input), source=SOURCE_TEMPLATE)

        # Step 3: Single model attempt, template fallback on failure
        try:
            strategy = await self.model_service.generate_strategy(campaign_input)
        except Exception as e:
            logger.warning("Model generation failed, falling back to template strategy", extra={
                "error": str(e),
                "error_type": type(e).__name__,
                "cause_type": type(e.cause).__name__ if isinstance(e, UpstreamError) and e.cause else None
            })
            return GeneratedStrategy(strategy=generate(campaign_input), source=SOURCE_TEMPLATE)

        logger.info("Strategy generated by model")
        return GeneratedStrategy(strategy=strategy, source=SOURCE_MODEL)
