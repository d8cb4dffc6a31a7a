from .loader import load_config
from .models import (
    ExtractionConfig,
    FlashdeckConfig,
    LLMSettings,
)

__all__ = [
    "ExtractionConfig",
    "FlashdeckConfig",
    "LLMSettings",
    "load_config",
]
