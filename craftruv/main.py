from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .dependencies import get_catalogs
from .exceptions import register_exception_handlers
from .routers import calculator, design, furniture

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("craftruv")

app = FastAPI(
    title="CraftRuv API",
    description="Corpus furniture pricing: catalogs, cost estimates, component breakdowns",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# API routes
app.include_router(calculator.router, prefix="/api")
app.include_router(furniture.router, prefix="/api")
app.include_router(design.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.on_event("startup")
def load_catalogs_on_startup():
    """Build the catalogs before the first request so a broken price list fails fast."""
    materials, furniture_types = get_catalogs()
    logger.info("%s ready: %d materials, %d furniture types",
                settings.APP_NAME, len(materials), len(furniture_types))
