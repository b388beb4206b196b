#!/usr/bin/env python3
"""
zfsquery API Service

FastAPI application exposing the read-only pool, file system, snapshot and
hold queries over HTTP.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from . import __version__
from .config import get_config
from .core.exceptions.zfs_exceptions import ZFSException
from .api.routers import pool_router

config = get_config()

logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting zfsquery API service...")
    logger.debug(f"Configuration: {config.get_summary()}")

    yield

    logger.info("Shutting down zfsquery API service...")


app = FastAPI(
    title="zfsquery API",
    description="Read-only queries over ZFS pools, file systems, snapshots and holds",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if config.server.enable_docs else None,
    redoc_url="/redoc" if config.server.enable_docs else None,
)


@app.exception_handler(ZFSException)
async def zfs_exception_handler(request, exc):
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "error": exc.to_dict()}
    )


app.include_router(pool_router)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": "zfsquery",
        "version": __version__,
        "description": "Read-only ZFS pool, snapshot and hold queries",
        "docs": "/docs" if config.server.enable_docs else None,
        "pools": "/api/v1/pools",
    }
