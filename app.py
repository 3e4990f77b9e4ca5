#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: The server handles multiple connections simultaneously via async I/O
(FastAPI + asyncpg connection pool + redis.asyncio). Set WORKERS > 1 for
multi-process scaling across CPU cores (each worker has its own DB pool).
Code uniqueness across workers is enforced by the database's UNIQUE index.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - postgresql://... connection URL, or memory:// for local runs
    DATABASE_CREATE_TABLES - Set to true to create tables on startup
    REDIS_URL - Redis connection URL (optional)
    API_PREFIX - Path prefix of the API (default /api)
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.database import create_store
from shortener.database.cache import RedisCache
from shortener.service import LinkService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger) -> LinkService:
    """Wire store, cache and generator into a service from configuration."""
    store = create_store(
        config.database_url,
        pool_max_size=config.database_pool_max_size,
        connection_timeout_seconds=config.database_timeout_seconds,
        create_tables=config.database_create_tables,
        logger=logger,
    )

    cache = None
    if config.redis_url:
        logger.info(f"Using Redis cache at {config.redis_url}")
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
    else:
        logger.info("Redis caching disabled")

    generator = ShortCodeGenerator(default_length=config.short_code_length)
    return LinkService(
        store=store,
        cache=cache,
        short_code_generator=generator,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
        fallback_code_length=config.fallback_code_length,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    service = build_service(config, logger)
    if service.cache:
        await service.cache.connect()

    app.state.store = service.store
    app.state.cache = service.cache
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    app = create_app(
        store_instance=None,  # Will be set in lifespan
        cache_instance=None,
        service_instance=None,
        config=config,
    )

    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
