"""Top-level router — aggregates the health, public and admin routers."""

from fastapi import APIRouter

from request_desk.presentation.routes.admin import router as admin_router
from request_desk.presentation.routes.health import router as health_router
from request_desk.presentation.routes.public import router as public_router

router = APIRouter()
router.include_router(health_router)
router.include_router(public_router)
router.include_router(admin_router)
