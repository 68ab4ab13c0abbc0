from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import logging
import time
from choirbook_core.config import Settings
from choirbook_core.init_db import init_db
from choirbook_core.logging_config import configure_logging
from .routes import calendar, reference, bookmarks, audio

logger = logging.getLogger("choirbook_api")

configure_logging()
settings = Settings()

app = FastAPI(title="Choirbook API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

@app.middleware("http")
async def request_logger(request, call_next):  # type: ignore
    start = time.time()
    path = request.url.path
    if path.startswith("/health") or path.startswith("/api/health"):
        return await call_next(request)
    response = await call_next(request)
    duration_ms = int((time.time() - start) * 1000)
    logger.info("http %s %s -> %s (%dms)", request.method, path, response.status_code, duration_ms)
    return response

api_router = APIRouter(prefix="/api")
api_router.include_router(calendar.router)
api_router.include_router(reference.router)
api_router.include_router(bookmarks.router)
api_router.include_router(audio.router)
app.include_router(api_router)

@app.on_event("startup")
async def on_startup():
    init_db()
    logger.info("api.start version=%s", app.version)

@app.on_event("shutdown")
async def on_shutdown():
    logger.info("api.stop")

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.get("/api/health")
async def api_health():
    return {
        "backend": "ok",
        "bookmark_key": settings.bookmark_storage_key,
        "filter_performances": settings.include_performances_in_filter,
        "version": app.version,
    }


def main() -> None:
    """Entry point for running the API directly."""
    import uvicorn

    uvicorn.run(
        "choirbook_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()

__all__ = ["app", "settings", "main"]
