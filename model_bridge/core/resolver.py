"""Model name resolution between the OpenAI and Gemini vocabularies.

Every function here is total: unrecognised names are never rejected, they
degrade to a default tier instead. Callers that need strict validation have
to layer it on top.
"""

import logging
import os
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict

from model_bridge.core import models
from model_bridge.core.registry import ModelRegistry
from model_bridge.schemas.embeddings import EmbeddingRequest

logger = logging.getLogger(__name__)

VISION_OVERRIDE_ENV = "GPT_4_VISION_PREVIEW"


class ResolverConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mapping_enabled: bool = True


class OverrideProvider(Protocol):
    def get_vision_override(self) -> Optional[str]:
        ...


class EnvironmentOverrideProvider:
    """Reads the vision override from the process environment on every call."""

    def __init__(self, env_var: str = VISION_OVERRIDE_ENV):
        self.env_var = env_var

    def get_vision_override(self) -> Optional[str]:
        return os.getenv(self.env_var)


class StaticOverrideProvider:
    """Fixed vision override, frozen when the provider is built."""

    def __init__(self, value: Optional[str] = None):
        self.value = value

    def get_vision_override(self) -> Optional[str]:
        return self.value


class ModelResolver:
    def __init__(
        self,
        config: ResolverConfig = None,
        overrides: OverrideProvider = None,
        registry: ModelRegistry = None,
    ):
        self.config = config or ResolverConfig()
        self.overrides = overrides or EnvironmentOverrideProvider()
        self.registry = registry or ModelRegistry()

    @property
    def mapping_enabled(self) -> bool:
        return self.config.mapping_enabled

    def owner_label(self) -> str:
        return models.OPENAI_OWNER if self.mapping_enabled else models.GOOGLE_OWNER

    def resolve_outbound_model(self, requested_model: str) -> str:
        if not self.mapping_enabled:
            return requested_model
        return self.translate_a_to_b(requested_model)

    def translate_a_to_b(self, name_a: str) -> str:
        return self.registry.resolve(name_a)

    def translate_b_to_a(self, name_b: str) -> str:
        if not self.mapping_enabled:
            return name_b
        return self.registry.reverse(name_b)

    def resolve_chat_model(self, req) -> str:
        """
        Pick the Gemini model for a chat request.

        The vision model is special-cased in both modes: it is served by flash
        unless the override names the pro model.
        """
        vision_name = models.GPT4_VISION_PREVIEW if self.mapping_enabled else models.GEMINI_1_0_PRO_VISION
        if req.model == vision_name:
            return self._resolve_vision()
        if self.mapping_enabled:
            return self.translate_a_to_b(req.model)
        return req.model

    def resolve_embedding_model(self, req) -> str:
        if self.mapping_enabled:
            return self.translate_a_to_b(req.model)
        return req.model

    def resolve_request_model(self, req) -> str:
        if isinstance(req, EmbeddingRequest):
            return self.resolve_embedding_model(req)
        return self.resolve_chat_model(req)

    def _resolve_vision(self) -> str:
        override = self.overrides.get_vision_override()
        if override == models.GEMINI_1_5_PRO:
            logger.debug(f"Vision override set, serving vision requests with '{models.GEMINI_1_5_PRO}'")
            return models.GEMINI_1_5_PRO
        return models.GEMINI_1_5_FLASH
