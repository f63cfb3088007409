import logging

from fastapi import FastAPI

from model_bridge.api.models import router as models_router
from model_bridge.config import Settings, load_settings
from model_bridge.core.resolver import ModelResolver, OverrideProvider
from model_bridge.core.router import ModelRouter

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)


def create_app(settings: Settings = None, overrides: OverrideProvider = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    resolver = ModelResolver(settings.resolver_config(), overrides)
    app = FastAPI(title="model-bridge")
    app.state.model_router = ModelRouter(resolver)
    app.include_router(models_router, prefix="/v1")
    logger.info(f"Serving models as owner '{resolver.owner_label()}'")
    return app
