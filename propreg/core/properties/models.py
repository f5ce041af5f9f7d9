from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field

from propreg.core.types import ResolvedType


class MissingCompatibilityDataError(RuntimeError):
    """Required compatibility data is absent; the data package is broken."""


class PropertyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Name the grammar and compat data are indexed under, never an alias key.
    canonical_name: str = Field(min_length=1)
    vendor_prefixed: bool = False
    shorthand: bool = False
    obsolete: bool = False
    types: Tuple[ResolvedType, ...] = ()


@dataclass(frozen=True)
class PropertyRegistries:
    """Result of one registry build. Both mappings are read-only."""

    properties: Mapping[str, PropertyRecord]
    svg_properties: Mapping[str, PropertyRecord]
    # CSS-wide keywords, accepted by every property in addition to its own types.
    globals: Tuple[ResolvedType, ...]
