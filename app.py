#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: request handlers run on the server's thread pool and share one
in-memory code store. Codes live only as long as the process, so the
service runs as a single worker.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links
    HOST - Interface to bind to
    PORT - Port to listen on
    SHORT_CODE_LENGTH - Length of generated short codes
    MAX_COLLISION_RETRIES - Candidate codes tried per request
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.storage.memory import InMemoryCodeStore
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger) -> URLShortenerService:
    """Wire the store, generator and service from configuration."""
    store = InMemoryCodeStore(logger=logger)
    generator = ShortCodeGenerator(
        default_length=config.short_code_length,
        alphabet=config.short_code_alphabet,
        max_attempts=config.max_collision_retries,
        hash_name=config.hash_algorithm,
    )
    return URLShortenerService(
        store=store,
        short_code_generator=generator,
        logger=logger,
        max_url_length=config.max_url_length,
        blocked_domains=config.blocked_domains,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Service started successfully")

    yield

    logger.info(
        f"Shutting down URL shortener service, "
        f"discarding {app.state.service.size()} short codes"
    )


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    try:
        service = build_service(config, logger)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    app = create_app(
        service_instance=service,
        config=config,
        logger=logger,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
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
