from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_path

from confit.config.models import ConfitSettings

logger = logging.getLogger(__name__)


def config_dir(settings: Optional[ConfitSettings] = None) -> Optional[Path]:
    """Return the per-user roaming configuration root, or None when the platform cannot report one."""
    settings = settings or ConfitSettings()
    if settings.config_dir:
        return Path(settings.config_dir).expanduser()

    try:
        path = user_config_path(roaming=True)
    except (OSError, RuntimeError, KeyError) as exc:
        logger.debug("Platform config directory lookup failed. error=%s", type(exc).__name__)
        return None

    if not path.is_absolute():
        logger.debug("Platform config directory is not absolute. path=%s", path)
        return None
    logger.debug("Resolved config directory. path=%s", path)
    return path
