# valetudo_map/app.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.deps import get_shared
from .api.routes import router
from . import config as C

_LOGGER = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=C.APP_TITLE)

    # CORS for the map UI (allow all origins; credentials False to keep wildcard)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=C.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    # make sure the shared state exists before the first request
    get_shared()
    _LOGGER.debug("Routes mounted under %s", C.API_PREFIX)
    return app


app = create_app()
