from fastapi import APIRouter

from .status import router as status_router
from .map import router as map_router
from .commands import router as commands_router
from ... import config as C

router = APIRouter(prefix=C.API_PREFIX)

router.include_router(status_router)
router.include_router(map_router)
router.include_router(commands_router)
