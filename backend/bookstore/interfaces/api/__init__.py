from fastapi import APIRouter

from ...infrastructure.config.settings import get_settings
from .routes import router as routes_router

router = APIRouter(prefix=get_settings().API_PREFIX)
router.include_router(routes_router)
