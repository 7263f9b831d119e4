"""HTTP routes mounted under API_PREFIX."""

from fastapi import APIRouter

from app.api import admin, health, public

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(public.router, tags=["public"])
router.include_router(admin.router, prefix="/admin")
