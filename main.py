import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import app_settings
from src.core.logging_config import setup_logging
from src.routers import garden as garden_router

# Configure logging VERY early
setup_logging(app_settings.log_level, json_logs=app_settings.json_logs)
logger = logging.getLogger(__name__)

app = FastAPI(title="Garden Plan Engine - Main API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(garden_router.router, prefix="/api/v1", tags=["garden"])

@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}

logger.info("Garden Plan Engine API ready")


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
