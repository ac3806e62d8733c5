"""Configuration loading for srcdoc (.srcdoc.yml, .env and environment)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import yaml
from dotenv import load_dotenv

from .logging import get_logger

CONFIG_FILENAME = ".srcdoc.yml"

DEFAULT_DOCS_DIR = "docs"
DEFAULT_SOURCE_DIR = "src"
DEFAULT_EXTENSIONS: Tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")
DEFAULT_EXCLUDED_DIRS: Tuple[str, ...] = ("node_modules",)
DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_BASE_URL = "https://api.anthropic.com/v1"

ENV_API_KEY = "ANTHROPIC_API_KEY"
ENV_MODEL = "SRCDOC_MODEL"
ENV_BASE_URL = "SRCDOC_BASE_URL"

logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one srcdoc run; built once at startup and never mutated."""

    root: Path
    docs_dir: str = DEFAULT_DOCS_DIR
    source_dir: str = DEFAULT_SOURCE_DIR
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    excluded_dirs: Tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    use_api: bool = False
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = 4000
    temperature: float = 0.1
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 120.0

    @property
    def docs_root(self) -> Path:
        return self.root / self.docs_dir

    @property
    def source_root(self) -> Path:
        return self.root / self.source_dir


def load_config(
    root: Path | str | None = None,
    *,
    use_api: bool = False,
    environ: Mapping[str, str] | None = None,
) -> GeneratorConfig:
    """Build the run configuration from defaults, .srcdoc.yml and the environment."""
    root_path = Path(root if root is not None else Path.cwd()).expanduser().resolve()

    if environ is None:
        load_dotenv(root_path / ".env", override=False)
        environ = os.environ

    data = _read_config(root_path / CONFIG_FILENAME)
    llm_data = _as_dict(data.get("llm"))

    api_key = environ.get(ENV_API_KEY) or None
    model = environ.get(ENV_MODEL) or _as_str(llm_data.get("model")) or DEFAULT_MODEL
    base_url = environ.get(ENV_BASE_URL) or _as_str(llm_data.get("base_url")) or DEFAULT_BASE_URL

    max_tokens = _as_int(llm_data.get("max_tokens"))
    temperature = _as_float(llm_data.get("temperature"))
    request_timeout = _as_float(llm_data.get("request_timeout"))

    config = GeneratorConfig(
        root=root_path,
        docs_dir=_as_str(data.get("docs_dir")) or DEFAULT_DOCS_DIR,
        source_dir=_as_str(data.get("source_dir")) or DEFAULT_SOURCE_DIR,
        extensions=_as_extensions(data.get("extensions")) or DEFAULT_EXTENSIONS,
        excluded_dirs=tuple(_as_str_list(data.get("excluded_dirs"))) or DEFAULT_EXCLUDED_DIRS,
        use_api=use_api,
        api_key=api_key,
        model=model,
        max_tokens=max_tokens if max_tokens is not None else 4000,
        temperature=temperature if temperature is not None else 0.1,
        base_url=base_url.rstrip("/"),
        request_timeout=request_timeout if request_timeout is not None else 120.0,
    )

    if config.api_key:
        logger.debug("API key detected: %s...", config.api_key[:8])
    elif config.use_api:
        logger.warning("No %s found in the environment", ENV_API_KEY)
    return config


def _read_config(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _as_extensions(value: Any) -> Tuple[str, ...]:
    extensions = []
    for item in _as_str_list(value):
        item = item.strip()
        if not item:
            continue
        extensions.append(item if item.startswith(".") else f".{item}")
    return tuple(extensions)


__all__ = ["ConfigError", "GeneratorConfig", "load_config"]
