"""
Hireline — FastAPI Backend
Serves the hiring-pipeline graph from a single JSON document.
"""
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from core.config import get_settings
from core.logging import configure_logging
from routers.data import router as data_router
from routers.graph import router as graph_router
from routers.people import router as people_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Hireline API", version="0.1.0")

if settings.FRONTEND_ORIGIN:
    origins = [o.strip() for o in settings.FRONTEND_ORIGIN.split(",") if o.strip()]
elif settings.ENV.lower() == "prod":
    raise RuntimeError("FRONTEND_ORIGIN must be set in production.")
else:
    origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(data_router)
app.include_router(people_router)
app.include_router(graph_router)


# ── Serve the single-page frontend (must be last) ──────────────────────────

FRONTEND_DIST = Path(__file__).parent.parent / "frontend" / "dist"

if FRONTEND_DIST.exists():
    app.mount("/assets", StaticFiles(directory=FRONTEND_DIST / "assets"), name="assets")

    @app.get("/{full_path:path}")
    async def serve_spa(full_path: str):
        """Return index.html for all non-API routes."""
        return FileResponse(FRONTEND_DIST / "index.html")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
