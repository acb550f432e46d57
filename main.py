from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from db import init_db
from course_recommendation import config
from course_recommendation.routes import router as recommendation_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The host platform owns the schema; only create tables for local databases
    if config.DB_CREATE_TABLES:
        init_db()
        logger.info("Database tables created")
    if config.USE_MOCK_DATA:
        logger.info("Serving recommendations from the built-in sample dataset")
    yield


app = FastAPI(
    title="Course Recommendation API",
    version="1.0.0",
    description="Co-enrollment course recommendations for the dashboard and mobile app.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendation_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
