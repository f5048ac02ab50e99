"""YAML config loading with env var expansion."""

import json
import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import CodeshotConfig

# Only these may be referenced as ${VAR} in codeshot.yaml
_ALLOWED_ENV_VARS = frozenset({"HOME", "CODESHOT_HOME", "CODESHOT_REGISTRY_CATALOG", "XDG_CONFIG_HOME"})

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def load_config(cli_path: str | None = None) -> CodeshotConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./codeshot.yaml"),
        Path.home() / ".codeshot" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return CodeshotConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return CodeshotConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", _lookup_env_var, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


def _lookup_env_var(match: re.Match[str]) -> str:
    name = match.group(1)
    if name not in _ALLOWED_ENV_VARS:
        raise ValueError(f"Environment variable {name!r} is not allowed in config")
    value = os.environ.get(name)
    if value is None:
        raise ValueError(f"Environment variable {name!r} is not set")
    return value


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(config: CodeshotConfig) -> None:
    """Apply log_level and log_format to the root logger."""
    handler = logging.StreamHandler()
    if config.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=_LOG_LEVELS[config.log_level], handlers=[handler], force=True)


# Default YAML template for `codeshot config init`
DEFAULT_CONFIG_TEMPLATE = """\
# codeshot.yaml

# Language/theme registry used to validate `language` and `theme`
registry:
  provider: "pygments"         # pygments | static
  # catalog: "${CODESHOT_REGISTRY_CATALOG}"   # YAML/JSON catalog, static provider only

# Presets
presets:
  directory: ".codeshot/presets"
  default_format: "yaml"       # yaml | json

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
