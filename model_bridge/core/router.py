import logging

from model_bridge.core.resolver import ModelResolver
from model_bridge.schemas.models import ModelList, ModelObject

logger = logging.getLogger(__name__)

class ModelRouter:
    def __init__(self, resolver: ModelResolver):
        self.resolver = resolver

    def select(self, request) -> str:
        resolved = self.resolver.resolve_request_model(request)
        logger.info(f"Resolved model '{request.model}' to '{resolved}'")
        return resolved

    def describe(self, backend_model: str) -> ModelObject:
        """Report a backend model the way the caller expects to see it."""
        return ModelObject(
            id=self.resolver.translate_b_to_a(backend_model),
            owned_by=self.resolver.owner_label(),
        )

    def list_models(self) -> ModelList:
        return ModelList(data=[self.describe(m) for m in self.resolver.registry.backend_models()])
