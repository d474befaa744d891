from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

from confit.codec import Format, get_codec
from confit.config.models import ConfitSettings
from confit.paths import config_dir
from confit.errors import CreateDirError, MissingConfigDirError, ReadFileError, WriteFileError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def config_file(
    app_name: str,
    file_name: str,
    fmt: Format,
    *,
    settings: Optional[ConfitSettings] = None,
) -> Path:
    root = config_dir(settings)
    if root is None:
        raise MissingConfigDirError()
    return root / app_name / f"{file_name}.{Format(fmt).extension}"


def _ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CreateDirError(path.parent) from exc


def _atomic_write_text(path: Path, text: str, *, encoding: str) -> None:
    # One tmp file per call; concurrent writers only race at the final replace.
    tmp_path: Optional[Path] = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(text)
        tmp_path.replace(path)
    except (OSError, UnicodeEncodeError) as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise WriteFileError(path) from exc


def load_or_init(
    app_name: str,
    file_name: str,
    fmt: Format,
    *,
    model: Type[T],
    settings: Optional[ConfitSettings] = None,
) -> T:
    """
    Load the config file for ``app_name``/``file_name``, creating it from ``model()`` when absent.

    An existing file is only read; a missing one is written once with the model's defaults.
    """
    settings = settings or ConfitSettings()
    codec = get_codec(fmt)
    path = config_file(app_name, file_name, fmt, settings=settings)

    if path.exists():
        logger.debug("Reading config file. path=%s", path)
        try:
            text = path.read_text(encoding=settings.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadFileError(path) from exc
        return codec.deserialize(text, model)

    _ensure_parent_dir(path)
    config = model()
    contents = codec.serialize(config)
    _atomic_write_text(path, contents, encoding=settings.encoding)
    logger.info("Config file initialized with defaults. path=%s", path)
    return config


def store(
    app_name: str,
    file_name: str,
    fmt: Format,
    config: BaseModel,
    *,
    settings: Optional[ConfitSettings] = None,
) -> None:
    """Overwrite the config file with ``config``. Existing content is replaced, not merged."""
    settings = settings or ConfitSettings()
    codec = get_codec(fmt)
    path = config_file(app_name, file_name, fmt, settings=settings)

    if not path.parent.exists():
        _ensure_parent_dir(path)

    contents = codec.serialize(config)
    logger.debug("Writing config file. path=%s", path)
    _atomic_write_text(path, contents, encoding=settings.encoding)
