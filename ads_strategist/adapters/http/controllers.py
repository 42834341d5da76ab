import json
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from ads_strategist.core.domain.errors import ParseError, ValidationError
from ads_strategist.core.ports.inbound import StrategyUseCasePort
from ads_strategist.adapters.http.models import ErrorResponseModel
from ads_strategist.logging_config import TimingContext

logger = logging.getLogger(__name__)

class StrategyController:
    """HTTP controller for strategy endpoints"""

    def __init__(self, strategy_use_case: StrategyUseCasePort):
        self.strategy_use_case = strategy_use_case

    async def generate_strategy(self, request: Request) -> JSONResponse:
        """Handle strategy generation request"""

        try:
            payload = await self._parse_body(request)

            with TimingContext("strategy generation", logger):
                result = await self.strategy_use_case.generate_strategy(payload)

            return JSONResponse(
                content=result.strategy.to_dict(),
                headers={"X-Strategy-Source": result.source}
            )

        except ParseError as e:
            logger.warning("Unparseable request body", extra={"error": str(e)})
            return self._error(400, "parse_error", str(e))
        except ValidationError as e:
            logger.warning("Validation error", extra={"field": e.field, "error": e.message})
            return self._error(422, "validation_error", e.message, field=e.field)
        except Exception as e:
            logger.error("Unexpected error", extra={
                "error": str(e),
                "error_type": type(e).__name__
            }, exc_info=True)
            return self._error(500, "internal_error", "Internal server error")

    async def _parse_body(self, request: Request) -> dict:
        body = await request.body()
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise ParseError(f"Request body is not valid JSON: {e}")

        if not isinstance(payload, dict):
            raise ParseError("Request body must be a JSON object")
        return payload

    def _error(self, status_code: int, error: str, detail: str, field: str = None) -> JSONResponse:
        body = ErrorResponseModel(error=error, detail=detail, field=field)
        return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
