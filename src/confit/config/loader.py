from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, MutableMapping

from dotenv import load_dotenv

from confit.config.models import ConfitSettings, SettingsLoadRequest

logger = logging.getLogger(__name__)


def _load_dotenv_if_present(dotenv_path: Path) -> None:
    if not dotenv_path.exists():
        logger.debug("Dotenv file not found, skipping. path=%s", dotenv_path)
        return
    load_dotenv(dotenv_path=dotenv_path, override=False)


def _env_var_name_to_key(env_var_name: str, prefix: str) -> str:
    key = env_var_name[len(prefix) :].lower()
    if not key:
        raise ValueError(f"Invalid environment variable override name: {env_var_name}")
    return key


def _apply_env_overrides(config: MutableMapping[str, Any], env_prefix: str) -> None:
    for name, value in os.environ.items():
        if not name.startswith(env_prefix):
            continue

        key = _env_var_name_to_key(name, env_prefix)
        if key not in config:
            raise KeyError(f"Unknown settings key: {key}")
        config[key] = value
        logger.debug("Applied settings override. key=%s", key)


def load_settings(request: SettingsLoadRequest = SettingsLoadRequest()) -> ConfitSettings:
    """Build settings from defaults, an optional .env file and prefixed environment variables."""
    config: dict[str, Any] = ConfitSettings().model_dump(mode="python")

    if request.dotenv_path is not None:
        _load_dotenv_if_present(Path(request.dotenv_path))

    _apply_env_overrides(config, request.env_prefix)
    return ConfitSettings.model_validate(config)
