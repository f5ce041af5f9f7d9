from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from propreg.core.data import DataSourceError, read_document

_log = logging.getLogger("propreg.compat")


class CompatibilityData:
    """Read-only access to the `css` tree of browser-compat-data.

    Accepts either the full BCD document (`{"css": {...}}`) or its `css`
    subtree directly.
    """

    def __init__(self, data: Mapping[str, Any]):
        css = data.get("css", data)
        if not isinstance(css, Mapping):
            raise DataSourceError("Compatibility data has no `css` mapping")
        self._properties: Mapping[str, Any] = css.get("properties") or {}
        self._types: Mapping[str, Any] = css.get("types") or {}

    @classmethod
    def from_file(cls, path: Path) -> "CompatibilityData":
        data = cls(read_document(path))
        _log.info(
            "Loaded compatibility data for %d properties and %d types from %s",
            len(data._properties),
            len(data._types),
            path,
        )
        return data

    @classmethod
    def empty(cls) -> "CompatibilityData":
        return cls({})

    def property_data(self, name: str) -> Optional[Mapping[str, Any]]:
        return self._properties.get(name)

    def types_data(self, name: str) -> Optional[Mapping[str, Any]]:
        return self._types.get(name)
