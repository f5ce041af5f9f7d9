from __future__ import annotations

import logging

from fastapi import FastAPI

from propreg.api.endpoints.properties import router as properties_router
from propreg.core.properties import PropertyRegistries

log = logging.getLogger("propreg.api")


def create_app(registries: PropertyRegistries) -> FastAPI:
    """Read-only lookup API over an already built registry."""
    app = FastAPI(
        title="CSS Property Registry API",
        version="0.1.0",
    )
    app.state.registries = registries

    # ------------------------------------------------------------
    # Versioned (authoritative)
    # ------------------------------------------------------------
    app.include_router(properties_router, prefix="/api/v1")

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "properties": len(registries.properties),
            "svg_properties": len(registries.svg_properties),
        }

    log.info(
        "API ready with %d properties and %d SVG properties",
        len(registries.properties),
        len(registries.svg_properties),
    )
    return app
