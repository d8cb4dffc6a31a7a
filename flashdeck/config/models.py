from pydantic import BaseModel, Field
from typing import Literal


class LLMSettings(BaseModel):
    provider: Literal["openai", "anthropic", "auto"] = "openai"
    model: str = "gpt-4o-mini"
    api_key_env: str = "OPENAI_API_KEY"
    max_tokens: int = Field(default=1000, gt=0)
    temperature: float = Field(default=0.3, ge=0)
    timeout: float = Field(default=60.0, gt=0)
    max_retries: int = Field(default=0, ge=0)
    retry_delay: float = Field(default=1.0, gt=0)


class ExtractionConfig(BaseModel):
    max_file_size_mb: int = Field(default=10, gt=0)


class FlashdeckConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
