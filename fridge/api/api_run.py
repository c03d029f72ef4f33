from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from fridge.api.routes import pantry, recipes, shopping
from fridge.utilities.exceptions import (
    ConfigurationMissingError,
    EmptyPantryError,
    ExternalFetchError,
    PersistenceWriteError,
)

# Logging
logger = logging.getLogger("fridge_app")

# Initialize FastAPI app
app = FastAPI(title="What's In My Fridge API")

# Include routers
app.include_router(pantry.router)
app.include_router(recipes.router)
app.include_router(shopping.router)


# -------------------- Error mapping --------------------
@app.exception_handler(ConfigurationMissingError)
async def _configuration_missing(request: Request, exc: ConfigurationMissingError):
    logger.error("Configuration missing: %s", exc)
    return JSONResponse(status_code=503, content={
        "detail": "Recipe service is not configured (missing SPOONACULAR_API_KEY)",
        "error": "configuration_missing",
    })


@app.exception_handler(ExternalFetchError)
async def _external_fetch_failed(request: Request, exc: ExternalFetchError):
    logger.warning("Recipe provider failure (%s): %s", exc.reason, exc)
    return JSONResponse(status_code=502, content={
        "detail": str(exc),
        "error": "external_fetch_failed",
        "reason": exc.reason,
        "status_code": exc.status_code,
    })


@app.exception_handler(EmptyPantryError)
async def _empty_pantry(request: Request, exc: EmptyPantryError):
    return JSONResponse(status_code=400, content={"detail": "Pantry is empty, cannot search.", "error": "empty_pantry"})


@app.exception_handler(PersistenceWriteError)
async def _persistence_failed(request: Request, exc: PersistenceWriteError):
    logger.error("Persistence write failed: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc), "error": "persistence_write_failed"})


@app.get("/api/health")
def health():
    return {"status": "ok"}
