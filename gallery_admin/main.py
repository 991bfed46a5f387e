from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
import uvicorn

from . import routers
from .database import check_db_connection, init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Gallery Admin API",
    description="Wedding gallery administration: RSVP and statistics",
    version="1.0.0",
)

# Add CORS middleware for the admin frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create the local demo tables"""
    logger.info("Starting Gallery Admin API")
    init_db()


# Include routers
app.include_router(routers.rsvp.router, prefix="/api/weddings/{wedding_id}/rsvp")
app.include_router(routers.statistics.router, prefix="/api/statistics")


@app.get("/")
async def root():
    return {"message": "Welcome to Gallery Admin API", "status": "running"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "gallery-admin-api",
        "version": "1.0.0",
        "backends": check_db_connection(),
    }


if __name__ == "__main__":
    uvicorn.run("gallery_admin.main:app", host="0.0.0.0", port=8000, reload=True)
