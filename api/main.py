from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, errors, settings
from core.logging import configure_logging
from test_projects import router as test_projects_router

configure_logging()
logger = logging.getLogger(__name__)

SERVICE_NAME = "Backend API"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # A missing DATABASE_URL or unreachable database aborts startup here.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title=SERVICE_NAME,
    version="1.0.0",
    description="CRUD API over test projects.",
    lifespan=lifespan,
    docs_url="/swagger",
    openapi_url="/swagger.json",
    redoc_url=None,
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

errors.register_exception_handlers(app)

app.include_router(test_projects_router.router, tags=["test projects"])


@app.get("/health")
def health() -> dict:
    return {"status": "healthy", "service": SERVICE_NAME}


@app.get("/")
def root() -> dict:
    return {
        "message": f"{SERVICE_NAME} is running",
        "status": "ok",
        "swagger": "/swagger",
        "api": "/api/test",
    }


def run() -> None:
    host, port = settings.host(), settings.port()
    logger.info("server_starting host=%s port=%s", host, port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level().lower())


if __name__ == "__main__":
    run()
