"""Main FastAPI application."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from api.exception_handlers import register_exception_handlers
from api.routes import router
from config.settings import settings
from models.database import Database
from utils.logger import setup_logger

logger = setup_logger(__name__)

INDEX_PAGE = Path(__file__).resolve().parent.parent / "view" / "index.html"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    logger.info("Starting application...")
    database = Database(settings.mongodb_url)
    app.state.store = await database.connect()
    logger.info(f"Application started, listening on port {settings.port}")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    database.close()
    logger.info("Application shut down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Users and their exercise logs",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log every request as `METHOD path - client ip`."""
    client_ip = request.client.host if request.client else "-"
    logger.info(f"{request.method} {request.url.path} - {client_ip}")
    return await call_next(request)


register_exception_handlers(app)

# Include API routes
app.include_router(router)


@app.get("/", include_in_schema=False)
async def root():
    """Serve the HTML form page."""
    return FileResponse(INDEX_PAGE)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
