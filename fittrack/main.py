import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.db import init_db, make_engine
from .core.errors import FitTrackError
from .core.llm import CalorieEstimator, build_estimator
from .core.logging import init_logging
from .core.security import PasswordHasher, TokenIssuer
from .api.routes import router as status_router
from .api.users import router as users_router
from .api.workouts import router as workouts_router
from .api.meals import router as meals_router

logger = logging.getLogger(__name__)


def _violation_path(loc) -> str:
    return "".join(f".{part}" if isinstance(part, str) else f"[{part}]" for part in loc)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FitTrackError)
    async def _fittrack_error(request: Request, exc: FitTrackError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {
                "path": _violation_path(err.get("loc", ())),
                "message": err.get("msg", "invalid"),
                "errorCode": f"{err.get('type', 'value')}.openapi.validation",
            }
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": errors})

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


def create_app(
    settings: Optional[Settings] = None,
    *,
    estimator: Optional[CalorieEstimator] = None,
) -> FastAPI:
    """
    Build the API. The engine, password hasher, token issuer and calorie
    estimator are constructed here and hung off ``app.state``; pass
    ``estimator`` to replace the OpenAI-backed one.
    """
    settings = settings or default_settings
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        docs_url=("/docs" if settings.ENABLE_DOCS else None),
        redoc_url=None,
        openapi_url=("/openapi.json" if settings.ENABLE_DOCS else None),
    )
    app.state.settings = settings
    app.state.engine = make_engine(settings.DATABASE_URL)
    app.state.hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.tokens = TokenIssuer(settings)
    app.state.estimator = estimator or build_estimator(settings)

    # CORS
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _install_error_handlers(app)

    # Create tables
    init_db(app.state.engine)

    # Routers
    app.include_router(status_router)
    app.include_router(users_router)
    app.include_router(workouts_router)
    app.include_router(meals_router)
    return app

