import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.questions import router as questions_router
from seed import SEED_QUESTIONS
from store import JsonFileRepository, questions_path

logger = logging.getLogger("engineerprep")
logging.basicConfig(level=logging.INFO)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One-time bootstrap: seed the store before serving if the file is absent.
    repo = JsonFileRepository(questions_path())
    if not repo.initialize(SEED_QUESTIONS):
        logger.info("Using questions file %s", repo.path)
    yield


app = FastAPI(title="EngineerPrep – Question API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


# Register routers
app.include_router(questions_router)  # /api/questions, /api/questions/{id}
app.include_router(marking_router)  # /api/check
app.include_router(health_router)  # /health/...


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "3000"))
    logger.info("EngineerPrep server running on http://localhost:%s", port)
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=port)
