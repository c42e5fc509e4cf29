from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from . import __version__
from .config import settings
from .routers import tube_weight

logger = logging.getLogger("tubeweight")
logger.setLevel(settings.LOG_LEVEL.upper())
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_handler)

app = FastAPI(
    title=settings.APP_NAME,
    description="Weight of hollow steel tube: round, square and rectangular",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(tube_weight.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "tubeweight"}
