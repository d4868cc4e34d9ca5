import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from shortlink_app.config import settings
from shortlink_app.database.connection import engine, Base
from shortlink_app.exceptions import LinkError, StorageError
from shortlink_app.api import health, links, redirect

# Import models to ensure they're registered with Base
from shortlink_app.models import Link

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger("shortlink_app")

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Short links with click counting, built with FastAPI",
    debug=settings.debug
)


@app.exception_handler(LinkError)
async def link_error_handler(request: Request, exc: LinkError):
    """Every domain error becomes {"error": message} with its status"""
    if isinstance(exc, StorageError):
        # Driver detail and traceback stay in the log only
        logger.exception(
            "%s %s failed: %s", request.method, request.url.path, exc.detail, exc_info=exc
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors (400), reported like the rest"""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if first.get("type") == "json_invalid":
        message = "Invalid JSON body"
    elif first.get("type") == "missing" and field == "url":
        message = "URL is required"
    elif field:
        message = f"Invalid value for '{field}': {first.get('msg', 'invalid')}"
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


######## Include routers
# Fixed paths first: /{code} would otherwise swallow them
app.include_router(health.router)
app.include_router(links.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
