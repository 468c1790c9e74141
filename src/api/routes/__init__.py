"""API routers mounted under ``/api``."""

from src.api.routes.calculation import router as calculation_router
from src.api.routes.taxonomy import router as taxonomy_router

__all__ = ["calculation_router", "taxonomy_router"]
