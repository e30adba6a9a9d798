# backend/server.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from backend.core.config import HOST, PORT, LOG_LEVEL, LOG_FORMAT, get_cors_origins
from backend.core.database import engine, init_db, ping_db
from backend.api.generate import router as generate_router
from backend.api.root import router as root_router

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await engine.dispose()


def _first_error(exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return "Invalid request", None
    err = errors[0]
    message = err.get("msg") or "Invalid request"
    # malformed JSON reports a byte offset, not a field
    if err.get("type") == "json_invalid":
        return message, None
    loc = [p for p in err.get("loc", ()) if isinstance(p, str) and p != "body"]
    return message, ".".join(loc) or None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Project Idea Generator",
        description="Rule-based generator for student and startup project ideas",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=get_cors_origins(),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            if request.url.path.startswith("/api"):
                duration_ms = int((time.perf_counter() - start) * 1000)
                logger.info("%s %s %s in %dms", request.method, request.url.path, status_code, duration_ms)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message, field = _first_error(exc)
        logger.info("Rejected %s %s: %s (%s)", request.method, request.url.path, message, field)
        return JSONResponse(status_code=400, content={"message": message, "field": field})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})

    app.include_router(root_router)
    app.include_router(generate_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "database": await ping_db()}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting server on %s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
