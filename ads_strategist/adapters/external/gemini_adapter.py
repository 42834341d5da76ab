import logging
import time
import requests
from starlette.concurrency import run_in_threadpool
from typing import Any, Dict, Optional
from pydantic import ValidationError as SchemaValidationError
from ads_strategist.adapters.external.strategy_schema import CampaignStrategyModel, to_gemini_schema
from ads_strategist.core.domain.entities import CampaignInput, CampaignStrategy
from ads_strategist.core.domain.errors import UpstreamError
from ads_strategist.core.ports.outbound import StrategyModelPort
from ads_strategist.infrastructure.prompts import PromptTemplates
from ads_strategist.json_repair_engine import parse_llm_json_with_repair
from ads_strategist.logging_config import log_external_api_call

logger = logging.getLogger(__name__)

class GeminiStrategyAdapter(StrategyModelPort):
    """Adapter for the Gemini generateContent REST API"""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-pro",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        prompt_template: str = PromptTemplates.STRATEGY_TEMPLATE,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.prompt_template = prompt_template
        self.session = session or requests.Session()
        self.response_schema = to_gemini_schema(CampaignStrategyModel)

    async def generate_strategy(self, campaign_input: CampaignInput) -> CampaignStrategy:
        """Generate a strategy with the model; raise UpstreamError on any failure"""

        endpoint = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": self.build_prompt(campaign_input)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": self.response_schema
            }
        }

        logger.debug("Making Gemini request", extra={"model": self.model, "timeout": self.timeout})

        start_time = time.time()
        try:
            # requests blocks; keep it off the event loop
            response = await run_in_threadpool(
                self.session.post,
                endpoint,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            log_external_api_call(
                logger, "gemini", endpoint,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                error=f"{type(e).__name__}: {e}"
            )
            raise UpstreamError("Gemini request failed", cause=e)

        duration_ms = round((time.time() - start_time) * 1000, 2)

        if response.status_code != 200:
            log_external_api_call(
                logger, "gemini", endpoint,
                response_status=response.status_code,
                duration_ms=duration_ms,
                error=response.text[:300]
            )
            raise UpstreamError(f"Gemini service error: {response.status_code}")

        log_external_api_call(
            logger, "gemini", endpoint,
            response_status=response.status_code,
            duration_ms=duration_ms
        )

        raw_text = self._extract_text(response)
        logger.debug("Raw Gemini response received", extra={
            "response_length": len(raw_text),
            "response_preview": raw_text[:300] + "..." if len(raw_text) > 300 else raw_text
        })

        try:
            parsed_data = parse_llm_json_with_repair(raw_text)
        except ValueError as e:
            raise UpstreamError("Gemini response is not JSON", cause=e)

        try:
            validated = CampaignStrategyModel.model_validate(parsed_data)
        except SchemaValidationError as e:
            logger.warning("Gemini response failed schema validation", extra={
                "error_count": e.error_count()
            })
            raise UpstreamError("Gemini response does not match the strategy schema", cause=e)

        strategy = CampaignStrategy.from_dict(validated.model_dump(by_alias=True, exclude_none=True))

        logger.info("Gemini response parsed successfully", extra={
            "funnel_stages": len(strategy.funnel_strategy),
            "schedule_days": len(strategy.campaign_schedule)
        })

        return strategy

    def build_prompt(self, campaign_input: CampaignInput) -> str:
        """Build the LLM prompt for strategy generation"""
        audience = campaign_input.target_audience
        return self.prompt_template.format(
            product_description=campaign_input.product_description,
            business_type=campaign_input.business_type,
            budget_amount=campaign_input.budget_amount,
            budget_period=campaign_input.budget_period,
            campaign_goal=campaign_input.campaign_goal,
            gender=audience.gender,
            age_min=audience.age_min,
            age_max=audience.age_max,
            location=audience.location,
            interests=", ".join(audience.interests)
        )

    def _extract_text(self, response: requests.Response) -> str:
        """Concatenate the text parts of the first candidate"""
        try:
            body: Dict[str, Any] = response.json()
        except ValueError as e:
            raise UpstreamError("Gemini returned a non-JSON envelope", cause=e)

        if not isinstance(body, dict):
            raise UpstreamError("Gemini returned an unexpected envelope")

        candidates = body.get("candidates") or []
        if not candidates:
            block_reason = (body.get("promptFeedback") or {}).get("blockReason")
            raise UpstreamError(f"Gemini returned no candidates (blockReason={block_reason})")

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts).strip()
        if not text:
            raise UpstreamError(
                f"Gemini returned an empty candidate (finishReason={candidates[0].get('finishReason')})"
            )
        return text
