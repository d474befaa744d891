"""Format tags and the serialize/deserialize codecs bound to them."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Type, TypeVar

import tomli_w
import yaml
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from confit.errors import DeserializeError, SerializeError, UnsupportedFormatError

T = TypeVar("T", bound=BaseModel)


class Format(str, Enum):
    """Closed set of text formats a config file can be stored in."""

    JSON = "json"
    RON = "ron"
    TOML = "toml"
    YAML = "yaml"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_extension(cls, ext: str) -> Format:
        normalized = ext.strip().lstrip(".").lower()
        if normalized == "yml":
            normalized = "yaml"
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedFormatError(ext) from None


class Codec(Protocol):
    """Serialize/deserialize pair bound to a single format."""

    format: Format

    def serialize(self, value: BaseModel) -> str:
        ...

    def deserialize(self, text: str, model: Type[T]) -> T:
        ...


@dataclass(frozen=True, slots=True)
class JsonCodec:
    """Pretty JSON with 2-space indentation, keys in declared field order."""

    format: Format = Format.JSON

    def serialize(self, value: BaseModel) -> str:
        try:
            return value.model_dump_json(indent=2)
        except PydanticSerializationError as exc:
            raise SerializeError(self.format) from exc

    def deserialize(self, text: str, model: Type[T]) -> T:
        try:
            return model.model_validate_json(text)
        except ValidationError as exc:
            raise DeserializeError(self.format) from exc


@dataclass(frozen=True, slots=True)
class TomlCodec:
    """TOML tables; fields set to None are left out."""

    format: Format = Format.TOML

    def serialize(self, value: BaseModel) -> str:
        # TOML has no null; absent keys fall back to field defaults on load.
        try:
            data = value.model_dump(mode="json", exclude_none=True)
            return tomli_w.dumps(data)
        except (PydanticSerializationError, TypeError) as exc:
            raise SerializeError(self.format) from exc

    def deserialize(self, text: str, model: Type[T]) -> T:
        try:
            data = tomllib.loads(text)
            return model.model_validate(data)
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise DeserializeError(self.format) from exc


@dataclass(frozen=True, slots=True)
class YamlCodec:
    format: Format = Format.YAML

    def serialize(self, value: BaseModel) -> str:
        try:
            data = value.model_dump(mode="json")
            return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
        except (PydanticSerializationError, yaml.YAMLError) as exc:
            raise SerializeError(self.format) from exc

    def deserialize(self, text: str, model: Type[T]) -> T:
        try:
            data = yaml.safe_load(text)
            if data is None:
                data = {}
            return model.model_validate(data)
        except (yaml.YAMLError, ValidationError) as exc:
            raise DeserializeError(self.format) from exc


_CODECS: dict[Format, Codec] = {}


def register_codec(codec: Codec) -> None:
    """Bind ``codec`` to its format, replacing any codec already bound there."""
    _CODECS[Format(codec.format)] = codec


def unregister_codec(fmt: Format) -> None:
    _CODECS.pop(fmt, None)


def get_codec(fmt: Format) -> Codec:
    codec = _CODECS.get(fmt)
    if codec is None:
        raise UnsupportedFormatError(fmt)
    return codec


def registered_formats() -> list[Format]:
    return [fmt for fmt in Format if fmt in _CODECS]


def serialize(value: BaseModel, fmt: Format) -> str:
    return get_codec(fmt).serialize(value)


def deserialize(text: str, fmt: Format, model: Type[T]) -> T:
    return get_codec(fmt).deserialize(text, model)


# RON ships without a codec; callers can provide one through register_codec.
for _codec in (JsonCodec(), TomlCodec(), YamlCodec()):
    register_codec(_codec)
del _codec
