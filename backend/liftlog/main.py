# liftlog/main.py
import time
import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from liftlog.routers.workout import router as workout_router
from liftlog.routers.history import router as history_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.catalog import ExerciseCatalog
from liftlog.db import SessionLocal, engine, init_db
from liftlog.session_manager import WorkoutSessionManager
from liftlog.settings import get_settings

log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One manager for the life of the process, torn down with it
    init_db(engine)
    catalog = ExerciseCatalog(SessionLocal)
    manager = WorkoutSessionManager.from_settings(SessionLocal, catalog)
    app.state.catalog = catalog
    app.state.workout_manager = manager
    log.info("LiftLog ready (env=%s db=%s)", get_settings().ENV, engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        await manager.shutdown()


app = FastAPI(
    title="LiftLog API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "workout", "description": "The workout in progress"},
        {"name": "history", "description": "Logged sessions, streaks, calendar and totals"},
        {"name": "exercises", "description": "Exercise catalog and custom exercises"},
    ],
)


# CORS (relax for local dev; tighten origins via env)
ALLOW_ORIGINS = get_settings().ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "LiftLog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(workout_router)
app.include_router(history_router)
app.include_router(exercises_router)
