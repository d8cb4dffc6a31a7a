"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import FlashdeckConfig


def load_config(cli_path: str | None = None) -> FlashdeckConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./flashdeck.yaml"),
        Path.home() / ".flashdeck" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return FlashdeckConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return FlashdeckConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `flashdeck config init`
DEFAULT_CONFIG_TEMPLATE = """\
# flashdeck.yaml

# LLM Provider
llm:
  provider: "openai"           # openai | anthropic | auto
  model: "gpt-4o-mini"
  api_key_env: "OPENAI_API_KEY"
  max_tokens: 1000             # ceiling on generated output per document
  temperature: 0.3
  timeout: 60                  # seconds, per backend call
  max_retries: 0               # extra attempts, only on rate limiting
  retry_delay: 1.0

# Extraction
extraction:
  max_file_size_mb: 10         # larger uploads are rejected before extraction

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
