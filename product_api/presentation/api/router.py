"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from product_api.presentation.api.endpoints.health import router as health_router
from product_api.presentation.api.endpoints.identifiers import router as identifiers_router
from product_api.presentation.api.endpoints.products import router as products_router

router = APIRouter()
router.include_router(health_router)
router.include_router(identifiers_router)
router.include_router(products_router)
