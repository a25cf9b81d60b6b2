# src/services/app.py
"""
HTTP-приложение QuickRide: USSD-колбэки, эндпоинты водителей и служебные.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.common.constants import TypeMsg
from src.common.exceptions import QuickRideError
from src.common.logger import log_info, log_warning, setup_logging
from src.config import settings
from src.services.admin_service.routes import router as admin_router
from src.services.driver_service.routes import router as driver_router
from src.services.state import build_state
from src.services.ussd_service.routes import router as ussd_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    state = app.state.quickride
    await state.catalog.reload(state.csv_path)
    if state.sessions.ttl_seconds:
        await state.sweeper.start()
    await log_info(
        f"{settings.ussd.SERVICE_NAME} готов: {len(state.catalog)} зон, режим ввода {settings.ussd.INPUT_MODE}",
        type_msg=TypeMsg.INFO,
    )
    yield
    await state.sweeper.stop()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.system.PROJECT_NAME,
        version=settings.system.VERSION,
        lifespan=lifespan,
    )
    app.state.quickride = build_state(settings)

    app.include_router(ussd_router)
    app.include_router(driver_router)
    app.include_router(admin_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        await log_warning(f"Некорректный запрос {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(QuickRideError)
    async def domain_error_handler(request: Request, exc: QuickRideError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return f"{settings.ussd.SERVICE_NAME} USSD backend is running"

    @app.get("/health")
    async def health_check(request: Request):
        return {
            "status": "ok",
            "service": settings.system.PROJECT_NAME,
            "locations": len(request.app.state.quickride.catalog),
        }

    return app


app = create_app()
