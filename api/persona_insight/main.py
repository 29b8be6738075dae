import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import LOG_LEVEL, SCORING_STRATEGY
from .routes import include_modular_routers
from .services.scoring import get_scorer


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Persona Insight API")
include_modular_routers(app)

# The upload page runs on a separate dev server.
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    # Raises on an unknown SCORING_STRATEGY.
    scorer = get_scorer(SCORING_STRATEGY)
    logger.info("Persona Insight API ready, default strategy=%s", scorer.name)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
