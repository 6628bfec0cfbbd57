"""
Banner Studio Server
====================

FastAPI server for the banner creative workflow.

Features:
- Banner copy generation from a persona/problem/benefit brief
- Three rule-based layout variations per banner size and copy
- Editor sessions with drag positioning, layers and undo/redo
- HTML previews of banners and variations
"""

import os
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Import services
from .services.copy_service import CopyService

# Import editor session manager
from .editor.banner_editor import EditorSettings
from .editor.session_manager import EditorSessionManager

# Import API routers
from .api import copy_routes, editor_routes, element_routes, layout_routes


# Shared service instances
session_manager: EditorSessionManager = None
copy_service: CopyService = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global session_manager, copy_service

    logger.info("[BANNER-STUDIO] Starting up...")

    # Initialize session manager
    sessions_dir = Path(os.getenv("BANNER_SESSIONS_DIR", Path(__file__).parent.parent / "sessions"))
    settings = EditorSettings.from_env()
    session_manager = EditorSessionManager(sessions_dir=sessions_dir, settings=settings)

    # Initialize copy service
    copy_service = CopyService()

    # Inject into route modules
    editor_routes.session_manager = session_manager
    editor_routes.copy_service = copy_service
    copy_routes.copy_service = copy_service

    logger.info(
        f"[BANNER-STUDIO] Services initialized "
        f"(history_limit={settings.history_limit}, debounce={settings.debounce_seconds}s)"
    )

    yield

    logger.info("[BANNER-STUDIO] Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Banner Studio",
    description="Banner copy, layout generation and editing API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(copy_routes.router)
app.include_router(layout_routes.router)
app.include_router(editor_routes.router)
app.include_router(element_routes.router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "service": "Banner Studio",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "copy": "/api/banner-copies/generate",
            "layouts": "/api/layouts/variations",
            "editor": "/api/editor/{session_id}",
            "elements": "/api/element/{session_id}/{element_id}"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "banner-studio"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "banner_studio.server:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=True
    )
