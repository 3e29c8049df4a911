"""
Mogost Toolkit Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from routers import archive_compare, config, csv_viewer, file_compare
from services.config_manager import ConfigManager
from services.storage import UploadStorage

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Mogost Toolkit server...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized from {config_manager.config_file}")

    UploadStorage(config_manager.get_config()).ensure_directories()

    yield
    print("[Backend] Shutting down Mogost Toolkit server...")


app = FastAPI(
    title="Mogost Toolkit",
    description="File compare, CSV viewer and archive compare tools",
    version="1.0.0",
    lifespan=lifespan,
)

# Tools are used from the browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

# Include routers
app.include_router(file_compare.router, prefix="/api/file-compare", tags=["file-compare"])
app.include_router(csv_viewer.router, prefix="/api/csv", tags=["csv"])
app.include_router(archive_compare.router, prefix="/api/archive-compare", tags=["archive-compare"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/")
async def index(request: Request):
    """Tool selection page"""
    return templates.TemplateResponse(request, "index.html", {"title": "Mogost Toolkit"})


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "mogost-toolkit"}


def run():
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    host = server.get("host", "0.0.0.0")
    port = int(server.get("port", 8080))
    print(f"[Backend] Mogost Toolkit server is running on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
