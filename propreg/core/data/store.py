"""
Raw property data sources.

  - MDN property data   (JSON, name -> {syntax, status, computed, ...})
  - MDN syntaxes        (JSON, data type name -> {syntax})
  - SVG property data   (YAML, name -> {syntax?})

Files are parsed as JSON first and fall back to YAML, so any of them may be
shipped in either format.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from .models import DataSourceError, PropertyMeta, SvgPropertyMeta

_log = logging.getLogger("propreg.data")


def read_document(path: Path) -> Dict[str, Any]:
    path = Path(path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataSourceError(f"Cannot read data file {path}: {exc}") from exc

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise DataSourceError(f"Failed to parse data file {path} as JSON or YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DataSourceError(f"Data file {path} must contain a mapping, got {type(data).__name__}")
    return data


class PropertyDataStore:
    """Canonical property definitions, data type syntaxes and SVG properties.

    Iteration order of `properties` and `svg_properties` is the order of the
    source documents and drives the registry build order.
    """

    def __init__(
        self,
        *,
        properties: Mapping[str, PropertyMeta],
        syntaxes: Mapping[str, str],
        svg_properties: Mapping[str, SvgPropertyMeta],
    ):
        self.properties = dict(properties)
        self.syntaxes = dict(syntaxes)
        self.svg_properties = dict(svg_properties)

    @classmethod
    def from_raw(
        cls,
        *,
        properties: Mapping[str, Any],
        syntaxes: Optional[Mapping[str, Any]] = None,
        svg_properties: Optional[Mapping[str, Any]] = None,
    ) -> "PropertyDataStore":
        try:
            parsed_properties = {str(k): PropertyMeta.model_validate(v or {}) for k, v in properties.items()}
            parsed_svg = {str(k): SvgPropertyMeta.model_validate(v or {}) for k, v in (svg_properties or {}).items()}
        except ValidationError as exc:
            raise DataSourceError(f"Invalid property data: {exc}") from exc

        parsed_syntaxes: Dict[str, str] = {}
        for name, value in (syntaxes or {}).items():
            if isinstance(value, dict):
                value = value.get("syntax")
            if isinstance(value, str) and value.strip():
                parsed_syntaxes[str(name)] = value
            else:
                _log.debug("Skipping data type %r without syntax", name)

        return cls(properties=parsed_properties, syntaxes=parsed_syntaxes, svg_properties=parsed_svg)

    @classmethod
    def from_files(cls, *, properties_path: Path, syntaxes_path: Path, svg_path: Path) -> "PropertyDataStore":
        store = cls.from_raw(
            properties=read_document(properties_path),
            syntaxes=read_document(syntaxes_path),
            svg_properties=read_document(svg_path),
        )
        _log.info(
            "Loaded %d properties, %d syntaxes and %d SVG properties",
            len(store.properties),
            len(store.syntaxes),
            len(store.svg_properties),
        )
        return store

    def property_syntax(self, name: str) -> str:
        meta = self.properties.get(name)
        return meta.syntax if meta is not None else ""
