"""Pytest configuration and fixtures."""

import pytest
import httpx

from config import Config
from shortener.storage.memory import InMemoryCodeStore
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create an empty code store."""
    return InMemoryCodeStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator with a fixed seed."""
    return ShortCodeGenerator(default_length=6, seed=1234)


@pytest.fixture
def service(store, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(base_url="http://testserver")


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
