"""
Text Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff
from services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Text Diff Backend...")
    config_manager = ConfigManager.get_instance()
    limits = config_manager.get_config().get("diff", {})
    print(
        f"[Backend] ConfigManager initialized ({config_manager.config_file}), "
        f"maxLines={limits.get('maxLines')}, maxCells={limits.get('maxCells')}"
    )

    yield
    print("[Backend] Shutting down Text Diff Backend...")


app = FastAPI(
    title="Text Diff Backend",
    description="Line-based diff service for the Text Diff tool",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)

app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "text-diff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8080))
