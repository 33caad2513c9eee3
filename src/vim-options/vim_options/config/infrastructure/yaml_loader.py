"""YAML option definitions loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from vim_options.config.domain.config import OptionsConfig
from vim_options.config.domain.observer import ConfigObserver
from vim_options.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlOptionsLoader:
    """Loads, validates, and returns an OptionsConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> OptionsConfig:
        """
        Load, validate, and return an OptionsConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing, unreadable or not valid YAML.
            ConfigValidationError: if the schema is violated or names repeat.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(name=cfg.name, option_count=len(cfg.options))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=f"cannot read file ({exc.strerror})") from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(path=path, reason="file is not valid UTF-8") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _build_config(raw: Any) -> OptionsConfig:
    if not isinstance(raw, dict):
        raise ConfigValidationError("top level must be a mapping")
    try:
        return OptionsConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
