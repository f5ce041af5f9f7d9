from __future__ import annotations

from typing import Mapping, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from propreg.core.properties import PropertyRecord, PropertyRegistries


router = APIRouter(tags=["properties"])


def get_registries(request: Request) -> PropertyRegistries:
    return request.app.state.registries


def _filtered(
    registry: Mapping[str, PropertyRecord],
    *,
    vendor: Optional[bool],
    obsolete: Optional[bool],
) -> list[str]:
    names = []
    for name, record in registry.items():
        if vendor is not None and record.vendor_prefixed != vendor:
            continue
        if obsolete is not None and record.obsolete != obsolete:
            continue
        names.append(name)
    return sorted(names)


@router.get("/properties")
def list_properties(
    vendor: Optional[bool] = None,
    obsolete: Optional[bool] = None,
    registries: PropertyRegistries = Depends(get_registries),
):
    return {
        "properties": _filtered(registries.properties, vendor=vendor, obsolete=obsolete),
    }


@router.get("/properties/{name}")
def get_property(name: str, registries: PropertyRegistries = Depends(get_registries)):
    record = registries.properties.get(name)
    if record is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return {"name": name, **record.model_dump(mode="json")}


@router.get("/svg-properties")
def list_svg_properties(registries: PropertyRegistries = Depends(get_registries)):
    return {
        "properties": sorted(registries.svg_properties.keys()),
    }


@router.get("/svg-properties/{name}")
def get_svg_property(name: str, registries: PropertyRegistries = Depends(get_registries)):
    record = registries.svg_properties.get(name)
    if record is None:
        raise HTTPException(status_code=404, detail="SVG property not found")
    return {"name": name, **record.model_dump(mode="json")}


@router.get("/globals")
def list_globals(registries: PropertyRegistries = Depends(get_registries)):
    return {
        "globals": [t.model_dump(mode="json") for t in registries.globals],
    }
