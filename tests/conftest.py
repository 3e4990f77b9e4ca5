"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator, Iterable, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.database.memory import InMemoryLinkStore
from shortener.service import LinkService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


class ScriptedGenerator(ShortCodeGenerator):
    """Generator returning a fixed sequence of codes, recording requested lengths."""

    def __init__(self, codes: Iterable[str], default_length: int = 6):
        super().__init__(default_length=default_length)
        self.codes: List[str] = list(codes)
        self.lengths: List[int] = []

    def generate(self, length: Optional[int] = None) -> str:
        self.lengths.append(length or self.default_length)
        return self.codes.pop(0)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def test_store(logger) -> AsyncGenerator[InMemoryLinkStore, None]:
    """Create test store instance."""
    store = InMemoryLinkStore(logger=logger)

    yield store

    await store.close()


@pytest.fixture
def short_code_generator():
    """Create short code generator with a seeded random source."""
    return ShortCodeGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def scripted_generator():
    """Factory for generators yielding predetermined codes."""
    return ScriptedGenerator


@pytest.fixture
def service(test_store, short_code_generator, logger) -> LinkService:
    """Create service instance."""
    return LinkService(
        store=test_store,
        cache=None,  # No cache for tests
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(database_url="memory://", _env_file=None)


@pytest.fixture
def app(test_store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=test_store,
        cache_instance=None,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "stackoverflow.com/questions/123456",
    ]
