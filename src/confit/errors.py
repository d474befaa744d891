from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from confit.codec import Format


class ConfitError(RuntimeError):
    pass


class MissingConfigDirError(ConfitError):
    def __init__(self) -> None:
        super().__init__("Missing config directory. The platform did not report a configuration root.")


class UnsupportedFormatError(ConfitError):
    def __init__(self, fmt: object) -> None:
        super().__init__(f"No codec registered for format. format={getattr(fmt, 'value', fmt)}")
        self.format = fmt


class SerializeError(ConfitError):
    def __init__(self, fmt: Format) -> None:
        super().__init__(f"Failed to serialize config. format={fmt.value}")
        self.format = fmt


class DeserializeError(ConfitError):
    def __init__(self, fmt: Format) -> None:
        super().__init__(f"Failed to deserialize config. format={fmt.value}")
        self.format = fmt


class _FileError(ConfitError):
    _action = ""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to {self._action}. path={path}")
        self.path = path


class ReadFileError(_FileError):
    _action = "read config file"


class CreateDirError(_FileError):
    _action = "create config directory"


class WriteFileError(_FileError):
    _action = "write config file"
