"""V1 API router aggregation."""

from fastapi import APIRouter

from astext.api.v1.render import router as render_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(render_router)
