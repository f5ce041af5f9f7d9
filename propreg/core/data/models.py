from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class DataSourceError(Exception):
    pass


class PropertyMeta(BaseModel):
    """One entry of the MDN property data (mdn-data `css/properties.json`)."""

    model_config = ConfigDict(extra="ignore")

    syntax: str = ""
    status: str = "standard"
    # Shorthands list their longhands here; longhands carry a single keyword.
    computed: Union[List[str], str, None] = None
    mdn_url: Optional[str] = None

    @property
    def shorthand(self) -> bool:
        return isinstance(self.computed, list)

    @property
    def obsolete(self) -> bool:
        return self.status == "obsolete"


class SvgPropertyMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    syntax: Optional[str] = None
