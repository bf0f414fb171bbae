from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings

# Initialize logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Quiet connection-pool chatter from provider requests:
logging.getLogger("urllib3").setLevel(logging.WARNING)

# Routers
from scoring import router as scoring_router  # noqa: E402
from scoring.crop_profiles import list_crops  # noqa: E402
from scoring.hazard_thresholds import list_hazards  # noqa: E402


@asynccontextmanager
async def lifespan(app):
    """Run once at startup, clean up at shutdown."""
    # START-UP --------------------------------------------------------
    logger.info(
        f"Scoring engine ready: {len(list_crops())} crops, {len(list_hazards())} hazards"
    )

    yield  # ----> application runs

    # SHUT-DOWN -------------------------------------------------------
    from cache_manager import cache
    cache.clear()


# Initialize FastAPI app
app = FastAPI(
    title="AgriScore API",
    description="Crop suitability and agricultural hazard risk scoring.",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(scoring_router)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint for basic health check."""
    return {"message": "Welcome to the AgriScore API"}


@app.get("/api/health")
async def health_check():
    """Health check endpoint to verify if the API is running."""
    return {"status": "API is up and running!"}
