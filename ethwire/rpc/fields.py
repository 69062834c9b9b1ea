"""
Field sources: one read capability over a JSON-RPC object, two adapters.

Entity decoders are written once against FieldSource. JsonFieldSource backs
the structured path (a JSON document); MapFieldSource backs the raw-map path
(an untyped Python mapping). Both read every JSON value the same way: hex
fields must be strings, and only numeric flags take booleans or numbers. The
map adapter additionally takes native ``bytes`` where a blob is expected.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Optional, Union

from ethwire.common.errors import InvalidEncoding, MissingOrMismatchedField
from ethwire.common.hexcodec import hex_to_bytes, hex_to_int


class FieldSource:
    """Read access to the named fields of one wire object."""

    def __init__(self, data: Mapping[str, Any], prefix: str = "") -> None:
        self._data = data
        self._prefix = prefix

    def path(self, name: str) -> str:
        return f"{self._prefix}.{name}" if self._prefix else name

    def _required(self, name: str) -> Any:
        raw = self._data.get(name)
        if raw is None:
            raise MissingOrMismatchedField("required field is missing", self.path(name))
        return raw

    def get_string(self, name: str) -> str:
        return self._coerce_string(self._required(name), self.path(name))

    def get_optional_string(self, name: str) -> Optional[str]:
        raw = self._data.get(name)
        if raw is None:
            return None
        return self._coerce_string(raw, self.path(name))

    def get_blob(self, name: str) -> bytes:
        return self._coerce_blob(self._required(name), self.path(name))

    def get_optional_blob(self, name: str) -> Optional[bytes]:
        raw = self._data.get(name)
        if raw is None:
            return None
        return self._coerce_blob(raw, self.path(name))

    def get_optional_flag(self, name: str) -> Optional[int]:
        """Numeric flag given as a JSON boolean, a number or a hex quantity."""
        raw = self._data.get(name)
        if raw is None:
            return None
        path = self.path(name)
        if isinstance(raw, bool):
            return int(raw)
        if isinstance(raw, int):
            if raw < 0:
                raise InvalidEncoding(f"negative flag {raw}", path)
            return raw
        if isinstance(raw, str):
            return hex_to_int(raw, path)
        raise MissingOrMismatchedField(f"expected flag, got {type(raw).__name__}", path)

    def get_list(self, name: str) -> list[Any]:
        raw = self._required(name)
        if not isinstance(raw, (list, tuple)):
            raise MissingOrMismatchedField(
                f"expected array, got {type(raw).__name__}", self.path(name)
            )
        return list(raw)

    def get_string_list(self, name: str) -> list[str]:
        return [
            self._coerce_string(item, f"{self.path(name)}[{i}]")
            for i, item in enumerate(self.get_list(name))
        ]

    def get_object_list(self, name: str) -> list[FieldSource]:
        sources = []
        for i, item in enumerate(self.get_list(name)):
            item_path = f"{self.path(name)}[{i}]"
            if not isinstance(item, Mapping):
                raise MissingOrMismatchedField(
                    f"expected object, got {type(item).__name__}", item_path
                )
            sources.append(type(self)(item, item_path))
        return sources

    def _coerce_string(self, raw: Any, path: str) -> str:
        # bool is an int subclass; neither stands for hex text
        if not isinstance(raw, str):
            raise MissingOrMismatchedField(f"expected hex string, got {type(raw).__name__}", path)
        return raw

    def _coerce_blob(self, raw: Any, path: str) -> bytes:
        return hex_to_bytes(self._coerce_string(raw, path), path)


class JsonFieldSource(FieldSource):
    """Adapter over a parsed JSON document."""

    @classmethod
    def from_payload(cls, payload: Union[str, bytes, bytearray, Mapping[str, Any]]) -> JsonFieldSource:
        if isinstance(payload, (str, bytes, bytearray)):
            try:
                payload = json.loads(payload)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MissingOrMismatchedField(f"invalid JSON document: {e}") from e
        if not isinstance(payload, Mapping):
            raise MissingOrMismatchedField(
                f"expected JSON object, got {type(payload).__name__}"
            )
        return cls(payload)


class MapFieldSource(FieldSource):
    """Adapter over an untyped mapping; blobs may also arrive as ``bytes``."""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> MapFieldSource:
        if not isinstance(mapping, Mapping):
            raise MissingOrMismatchedField(f"expected mapping, got {type(mapping).__name__}")
        return cls(mapping)

    def _coerce_blob(self, raw: Any, path: str) -> bytes:
        if isinstance(raw, (bytes, bytearray)):
            return bytes(raw)
        return super()._coerce_blob(raw, path)
