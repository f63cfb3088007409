from typing import Callable, List, Tuple

from model_bridge.core import models

Rule = Tuple[Callable[[str], bool], str]

# Order matters: first match wins, later rules are narrower fallbacks.
FORWARD_RULES: List[Rule] = [
    (lambda name: name == models.GPT4_VISION_PREVIEW, models.GEMINI_1_0_PRO_VISION),
    (lambda name: name in models.GPT4_TURBO_FAMILY, models.GEMINI_1_5_PRO),
    (lambda name: name.startswith(models.GPT4), models.GEMINI_1_5_FLASH),
    (lambda name: name == models.ADA_EMBEDDING_V2, models.TEXT_EMBEDDING_004),
]

REVERSE_TABLE = {
    models.GEMINI_1_0_PRO_VISION: models.GPT4_VISION_PREVIEW,
    models.GEMINI_1_5_PRO: models.GPT4_TURBO_PREVIEW,
    models.GEMINI_1_5_FLASH: models.GPT4,
    models.TEXT_EMBEDDING_004: models.ADA_EMBEDDING_V2,
}

# Published in model listings, in this order
BACKEND_MODELS = [
    models.GEMINI_1_5_PRO,
    models.GEMINI_1_5_FLASH,
    models.GEMINI_1_5_FLASH_8B,
    models.GEMINI_1_0_PRO_VISION,
    models.TEXT_EMBEDDING_004,
]


class ModelRegistry:
    def __init__(self, rules: List[Rule] = None, reverse: dict = None, catalogue: List[str] = None):
        self._rules = list(FORWARD_RULES if rules is None else rules)
        self._reverse = dict(REVERSE_TABLE if reverse is None else reverse)
        self._catalogue = list(BACKEND_MODELS if catalogue is None else catalogue)

    def resolve(self, model_name: str) -> str:
        """
        Map an OpenAI model name to the Gemini model that serves it.
        Unknown names fall through to the cheapest Gemini tier.
        """
        for matches, target in self._rules:
            if matches(model_name):
                return target
        return models.DEFAULT_GEMINI_MODEL

    def reverse(self, model_name: str) -> str:
        """
        Map a Gemini model name back to the OpenAI name we report.
        Unknown names are reported as the baseline OpenAI model.
        """
        return self._reverse.get(model_name, models.DEFAULT_OPENAI_MODEL)

    def backend_models(self) -> List[str]:
        return list(self._catalogue)
