from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ConfitSettings(BaseModel):
    """
    Library-level settings shared by every load/store call.

    An empty ``config_dir`` means the platform's roaming configuration root.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_dir: str = ""
    encoding: str = "utf-8"


@dataclass(frozen=True, slots=True)
class SettingsLoadRequest:
    """
    Optional inputs for ``load_settings``.

    ``dotenv_path`` is only read when set and present on disk.
    """

    env_prefix: str = "CONFIT__"
    dotenv_path: Optional[str] = None
