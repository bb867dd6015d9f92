#!/usr/bin/env python3
"""
Catalog Routes - read-only HTTP lookups for remote bus-access layers
"""

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException

from .catalog import RegisterCatalog, default_catalog
from .errors import UnknownChip, UnknownFeature
from .schemas import ChipListResponse, ChipSchema, FeatureResponse, FeatureSchema

logger = logging.getLogger("sensorchips.api")


def create_catalog_routes(catalog: RegisterCatalog) -> APIRouter:
    """Create catalog lookup routes bound to one catalog."""
    router = APIRouter()

    @router.get("/api/chips", response_model=ChipListResponse)
    def list_chips():
        """All chip prefixes in declaration order."""
        return {"chips": list(catalog.prefixes())}

    @router.get("/api/chips/{prefix}", response_model=ChipSchema)
    def get_chip(prefix: str):
        """One chip with its features in declaration order."""
        try:
            chip = catalog.chip(prefix)
        except UnknownChip as e:
            raise HTTPException(status_code=404, detail=str(e))
        return ChipSchema.from_chip(chip)

    @router.get("/api/chips/{prefix}/features/{name}", response_model=FeatureResponse)
    def get_feature(prefix: str, name: str):
        """Resolve a feature name to its register number and access mode."""
        try:
            chip = catalog.chip(prefix)
            feature = chip.feature(name)
        except (UnknownChip, UnknownFeature) as e:
            raise HTTPException(status_code=404, detail=str(e))
        return {"prefix": prefix, "feature": FeatureSchema.from_feature(feature, chip)}

    @router.get("/api/chips/{prefix}/registers/{number}", response_model=FeatureResponse)
    def get_register(prefix: str, number: int):
        """Reverse lookup of a register number."""
        try:
            chip = catalog.chip(prefix)
            feature = chip.feature_by_number(number)
        except (UnknownChip, UnknownFeature) as e:
            raise HTTPException(status_code=404, detail=str(e))
        return {"prefix": prefix, "feature": FeatureSchema.from_feature(feature, chip)}

    @router.get("/health")
    def health():
        return {"status": "ok", "chips": len(catalog)}

    return router


def create_app(catalog: Optional[RegisterCatalog] = None) -> FastAPI:
    """Create the FastAPI app serving a catalog (built-in chips by default)."""
    catalog = catalog if catalog is not None else default_catalog
    app = FastAPI(title="sensorchips", docs_url=None, redoc_url=None)
    app.include_router(create_catalog_routes(catalog))
    logger.info("catalog routes ready for %d chips", len(catalog))
    return app
