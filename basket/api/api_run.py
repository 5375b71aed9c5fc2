from fastapi import FastAPI
from fastapi.responses import JSONResponse

from datetime import datetime, timezone
import logging
import os

from basket.api.routes import offers, products, shopping_lists, shops
from basket.infra import paths
from basket.utilities.config import API_VERSION

# Logging
logger = logging.getLogger("basket_app")

# Initialize FastAPI app
app = FastAPI(title="Shopping Planner API", version=API_VERSION)

# Include routers
app.include_router(shops.router)
app.include_router(products.router)
app.include_router(offers.router)
app.include_router(shopping_lists.router)


def _storage_ready() -> bool:
    """True when the data directory exists (or can be created) and is writable."""
    try:
        os.makedirs(paths.DATA_DIR, exist_ok=True)
    except OSError as e:
        logger.error("Data directory %s unavailable: %s", paths.DATA_DIR, e)
        return False
    return os.access(paths.DATA_DIR, os.W_OK)


@app.on_event("startup")
def _startup_storage():
    """Make sure the data directory is usable when the app starts."""
    if _storage_ready():
        logger.info("Storing data in %s", paths.DATA_DIR)
    else:
        logger.error("Data directory %s is not writable; writes will fail", paths.DATA_DIR)


# -------------------- HEALTH --------------------
@app.get("/health")
def health():
    ready = _storage_ready()
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ok" if ready else "degraded",
            "message": "Shopping Planner API is running",
            "storage": "writable" if ready else "unavailable",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


@app.get("/api")
def api_info():
    return {"message": "Shopping Planner API", "version": API_VERSION}
