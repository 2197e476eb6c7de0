from fastapi import APIRouter

from errs.api.routes.v1.errors import router as errors_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(errors_router)
