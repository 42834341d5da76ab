# Dependency injection and composition root
import logging
from ads_strategist.core.use_cases.strategy_use_case import GenerateStrategyUseCase
from ads_strategist.adapters.external.gemini_adapter import GeminiStrategyAdapter
from ads_strategist.adapters.http.controllers import StrategyController
from ads_strategist.infrastructure.config import Config, config
from ads_strategist.infrastructure.prompts import prompt_config

logger = logging.getLogger(__name__)

def setup_dependencies(app_config: Config = config) -> StrategyController:
    """Setup dependency injection and return configured controller"""

    # External adapter (outbound port), only when a credential is configured
    model_adapter = None
    if app_config.model_enabled:
        model_adapter = GeminiStrategyAdapter(
            api_key=app_config.GOOGLE_GENERATIVE_AI_API_KEY.strip(),
            model=app_config.GEMINI_MODEL,
            base_url=app_config.GEMINI_API_BASE,
            timeout=app_config.GEMINI_TIMEOUT_SECONDS,
            prompt_template=prompt_config.get_template()
        )
    else:
        logger.warning("GOOGLE_GENERATIVE_AI_API_KEY not set, serving template strategies")

    # Use case (application layer)
    strategy_use_case = GenerateStrategyUseCase(model_service=model_adapter)

    # HTTP controller (inbound adapter)
    return StrategyController(strategy_use_case=strategy_use_case)
