"""
Pytest configuration and fixtures for OER Schema tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from oerschema.config import Settings, get_settings
from oerschema.converters import ConversionOptions
from oerschema.main import app
from oerschema.models.vocabulary import Vocabulary
from oerschema.services.vocabulary_loader import get_vocabulary
from oerschema.storage import LocalStorageBackend

BASE_URL = "http://oerschema.org/"


@pytest.fixture
def sample_vocabulary_data() -> dict[str, Any]:
    """Raw vocabulary definition, as it appears in the YAML file."""
    return {
        "version": "1.0.0",
        "classes": {
            "Resource": {
                "label": "Resource",
                "comment": "Any educational resource",
                "schema": "root",
                "subClassOf": ["http://schema.org/CreativeWork"],
                "properties": [],
            },
            "Course": {
                "label": "Course",
                "comment": "An instructional course",
                "subClassOf": ["Resource", "http://schema.org/Course"],
                "properties": ["courseIdentifier"],
            },
            "Syllabus": {
                "label": "Syllabus",
                "subClassOf": "Resource",
                "properties": ["courseIdentifier", "duration", "notDefined"],
            },
        },
        "properties": {
            "courseIdentifier": {
                "label": "Course Identifier",
                "comment": 'Code such as "CS 101" & <abbr>',
                "domain": ["Course", "Syllabus"],
                "range": ["Text"],
            },
            "duration": {
                "label": "Duration",
                "domain": ["Syllabus"],
                "range": ["Integer"],
            },
            "homepage": {
                "label": "Homepage",
                "comment": "Public page of the resource",
                "domain": ["Resource"],
                "range": ["URL"],
                "inverseOf": "homepageOf",
                "alternateType": "http://schema.org/url",
                "baseVocab": "http://schema.org/",
            },
        },
    }


@pytest.fixture
def sample_vocabulary(sample_vocabulary_data: dict[str, Any]) -> Vocabulary:
    """Validated sample vocabulary."""
    return Vocabulary.model_validate(sample_vocabulary_data)


@pytest.fixture
def options() -> ConversionOptions:
    """Default compact conversion options."""
    return ConversionOptions(base_url=BASE_URL)


@pytest.fixture
def test_settings() -> Settings:
    """Get test settings."""
    return Settings(BASE_URL=BASE_URL, PRETTY_JSON=False, USE_REQUEST_BASE_URL=False)


@pytest.fixture
def test_storage(tmp_path) -> LocalStorageBackend:
    """Create a test storage backend."""
    return LocalStorageBackend(base_path=str(tmp_path / "static"))


@pytest_asyncio.fixture(scope="function")
async def client(
    sample_vocabulary: Vocabulary,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client serving the sample vocabulary."""
    app.dependency_overrides[get_vocabulary] = lambda: sample_vocabulary
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
