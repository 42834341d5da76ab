import uvicorn
from fastapi import FastAPI, Request
from ads_strategist.adapters.external.strategy_schema import CampaignStrategyModel
from ads_strategist.adapters.http.models import ErrorResponseModel
from ads_strategist.infrastructure.middleware import LoggingMiddleware
from ads_strategist.infrastructure.dependencies import setup_dependencies
from ads_strategist.infrastructure.config import Config, config
from ads_strategist.logging_config import setup_logging

def create_app(app_config: Config = config) -> FastAPI:
    """Build the FastAPI application for the given configuration"""

    # Setup logging
    setup_logging(app_config.SERVICE_NAME, app_config.LOG_LEVEL)

    # Initialize FastAPI app
    app = FastAPI(title=app_config.APP_TITLE, version=app_config.APP_VERSION)

    # Add middleware
    app.add_middleware(LoggingMiddleware)

    # Setup dependencies
    controller = setup_dependencies(app_config)

    # Routes
    @app.post(
        "/api/generate-strategy",
        response_model=CampaignStrategyModel,
        responses={400: {"model": ErrorResponseModel}, 422: {"model": ErrorResponseModel}}
    )
    async def generate_strategy(request: Request):
        """Generate a Meta Ads strategy from the campaign form"""
        return await controller.generate_strategy(request)

    return app

app = create_app()

def main():
    uvicorn.run(app, host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    main()
