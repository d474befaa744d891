"""Load and store per-application config files under the user's roaming config directory."""

from confit.codec import (
    Codec,
    Format,
    JsonCodec,
    TomlCodec,
    YamlCodec,
    deserialize,
    get_codec,
    register_codec,
    registered_formats,
    serialize,
    unregister_codec,
)
from confit.config import ConfitSettings, SettingsLoadRequest, load_settings
from confit.paths import config_dir
from confit.errors import (
    ConfitError,
    CreateDirError,
    DeserializeError,
    MissingConfigDirError,
    ReadFileError,
    SerializeError,
    UnsupportedFormatError,
    WriteFileError,
)
from confit.config_store import config_file, load_or_init, store

__all__ = [
    "Codec",
    "ConfitError",
    "ConfitSettings",
    "CreateDirError",
    "DeserializeError",
    "Format",
    "JsonCodec",
    "MissingConfigDirError",
    "ReadFileError",
    "SerializeError",
    "SettingsLoadRequest",
    "TomlCodec",
    "UnsupportedFormatError",
    "WriteFileError",
    "YamlCodec",
    "config_dir",
    "config_file",
    "deserialize",
    "get_codec",
    "load_or_init",
    "load_settings",
    "register_codec",
    "registered_formats",
    "serialize",
    "store",
    "unregister_codec",
]
