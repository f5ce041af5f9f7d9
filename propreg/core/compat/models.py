from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# BCD versions are strings ("1", "≤79", "preview"), true for "supported, version
# unknown", false for "not supported", null for "unknown".
VersionValue = Union[bool, str, None]


def _is_released(version: VersionValue) -> bool:
    if isinstance(version, bool):
        return version
    if version is None:
        return False
    return version != "preview"


class SupportStatement(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version_added: VersionValue = None
    version_removed: VersionValue = None
    prefix: Optional[str] = None
    alternative_name: Optional[str] = None
    flags: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def added(self) -> bool:
        # Support behind a flag is not support.
        return not self.flags and _is_released(self.version_added)

    @property
    def removed(self) -> bool:
        return _is_released(self.version_removed)


class CompatStatus(BaseModel):
    model_config = ConfigDict(extra="ignore")

    experimental: bool = False
    standard_track: bool = True
    deprecated: bool = False


class CompatStatement(BaseModel):
    """The `__compat` block of a BCD feature."""

    model_config = ConfigDict(extra="ignore")

    support: Dict[str, List[SupportStatement]] = Field(default_factory=dict)
    status: Optional[CompatStatus] = None

    @field_validator("support", mode="before")
    @classmethod
    def _listify_support(cls, value: Any) -> Any:
        # BCD uses a single statement or a list of them per browser
        if not isinstance(value, dict):
            return value
        out: Dict[str, Any] = {}
        for browser, statements in value.items():
            if isinstance(statements, dict):
                out[browser] = [statements]
            elif isinstance(statements, list):
                out[browser] = statements
        return out

    def statements(self):
        for browser_statements in self.support.values():
            yield from browser_statements
