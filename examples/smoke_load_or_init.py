from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel

from confit import Format, load_or_init, load_settings, store


class WindowSettings(BaseModel):
    title: str = "Confit demo"
    width: int = 800
    height: int = 600
    recent_files: List[str] = []


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    logger = logging.getLogger("smoke")

    settings = load_settings()
    config = load_or_init("ConfitDemo", "window", Format.TOML, model=WindowSettings, settings=settings)
    logger.info("Config loaded width=%s height=%s", config.width, config.height)

    updated = config.model_copy(update={"recent_files": [*config.recent_files, "notes.txt"]})
    store("ConfitDemo", "window", Format.TOML, updated, settings=settings)
    logger.info("Config stored recent_files=%s", len(updated.recent_files))


if __name__ == "__main__":
    main()
