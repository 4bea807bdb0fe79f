from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from contextlib import asynccontextmanager
import logging
from symbol_autoloader.core.config import settings
from symbol_autoloader.core.logging_config import configure_logging
from symbol_autoloader.api import autoload as autoload_router
from symbol_autoloader.api import version as version_router
from symbol_autoloader.autoload.bootstrap import load_core_libraries
from symbol_autoloader.autoload.resolver import get_autoloader

_log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and optionally preload the host's core libraries.

    Core libraries are host code: a missing file or a fault while loading one
    aborts startup instead of being absorbed.
    """
    configure_logging(settings.log_level)
    loader = get_autoloader()
    if settings.load_core_libraries:
        load_core_libraries(loader.settings)
    _log.info(
        "autoloader ready namespace=%s registry=%d plugin_dir=%s",
        loader.settings.root_namespace, len(loader.registry), loader.settings.plugin_dir,
    )
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    _log.warning("validation error url=%s errors=%s", request.url, exc.errors())
    return JSONResponse(status_code=422, content={'detail': jsonable_encoder(exc.errors())})


app.include_router(autoload_router.router, prefix=settings.api_v1_prefix)
app.include_router(version_router.router, prefix=settings.api_v1_prefix)

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.get('/')
async def root():
    return {'status': 'ok', 'app': settings.app_name}
