import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.database import build_engine, build_sessionmaker, create_tables
from app.routers.exercises import router as exercises_router
from app.routers.users import router as users_router
from app.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(__file__)
VIEWS_DIR = os.path.join(BASE_DIR, "views")
PUBLIC_DIR = os.path.join(BASE_DIR, "public")


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = build_engine(settings)
    await create_tables(engine)
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))

    app.state.engine = engine
    app.state.session_factory = build_sessionmaker(engine)
    yield
    await engine.dispose()


app = FastAPI(
    title="Exercise Tracker API",
    description="Users, their exercises and per-user exercise logs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(users_router, prefix="/api")
app.include_router(exercises_router, prefix="/api")
app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(os.path.join(VIEWS_DIR, "index.html"))


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "exercise-tracker", "version": "0.1.0"}
