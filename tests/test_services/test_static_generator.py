"""
Tests for static site generation.
"""

import json

import pytest
from rdflib import Graph

from oerschema.converters import ConversionOptions
from oerschema.core.exceptions import ValidationException
from oerschema.models.vocabulary import Vocabulary
from oerschema.services.static_generator import StaticSiteGenerator, parse_scopes
from oerschema.storage import LocalStorageBackend

CLASS_EXTENSIONS = ["json", "jsonld", "schema.json", "rdf", "ttl", "nt", "rdfa.html", "microdata.html"]


@pytest.fixture
def generator(
    sample_vocabulary: Vocabulary,
    test_storage: LocalStorageBackend,
    options: ConversionOptions,
) -> StaticSiteGenerator:
    return StaticSiteGenerator(sample_vocabulary, test_storage, options)


@pytest.mark.asyncio
async def test_generate_writes_every_format(generator: StaticSiteGenerator):
    written = await generator.generate()

    # 5 vocabulary files, 2 indexes, 6 entities in 8 formats plus a directory index each
    assert len(written) == 5 + 2 + 6 * 8 + 6
    assert len(set(written)) == len(written)
    for ext in ["json", "jsonld", "rdf", "ttl", "nt"]:
        assert f"schema/schema.{ext}" in written
    assert "schema/schema.schema.json" not in written
    for ext in CLASS_EXTENSIONS:
        assert f"schema/class/Course.{ext}" in written
        assert f"schema/property/courseIdentifier.{ext}" in written


@pytest.mark.asyncio
async def test_files_match_converter_output(
    generator: StaticSiteGenerator, test_storage: LocalStorageBackend
):
    await generator.generate()

    turtle = await test_storage.read_text("schema/class/Course.ttl")
    assert "oer:Course a rdfs:Class" in turtle
    graph = Graph().parse(data=await test_storage.read_text("schema/schema.ttl"), format="turtle")
    assert len(graph) > 0

    course = json.loads(await test_storage.read_text("schema/class/Course.json"))
    assert course["className"] == "Course"


@pytest.mark.asyncio
async def test_index_files(generator: StaticSiteGenerator, test_storage: LocalStorageBackend):
    await generator.generate()

    classes = json.loads(await test_storage.read_text("schema/class/index.json"))
    properties = json.loads(await test_storage.read_text("schema/property/index.json"))

    assert [entry["name"] for entry in classes] == ["Resource", "Course", "Syllabus"]
    assert classes[1] == {"name": "Course", "label": "Course", "url": "/schema/class/Course"}
    assert [entry["name"] for entry in properties] == ["courseIdentifier", "duration", "homepage"]


@pytest.mark.asyncio
async def test_class_json_lists_domain_properties(
    generator: StaticSiteGenerator, test_storage: LocalStorageBackend
):
    await generator.generate(["class"])

    resource = json.loads(await test_storage.read_text("schema/class/Resource.json"))
    course = json.loads(await test_storage.read_text("schema/class/Course.json"))
    syllabus = json.loads(await test_storage.read_text("schema/class/Syllabus.json"))

    assert resource["properties"] == ["homepage"]
    assert course["properties"] == ["courseIdentifier"]
    # "notDefined" is declared on the class but no property names it in its domain
    assert syllabus["properties"] == ["courseIdentifier", "duration"]

    turtle = await test_storage.read_text("schema/class/Syllabus.ttl")
    assert 'oer:properties "notDefined"' in turtle


@pytest.mark.asyncio
async def test_directory_index_files(
    generator: StaticSiteGenerator, test_storage: LocalStorageBackend
):
    written = await generator.generate()

    for name in ["Resource", "Course", "Syllabus"]:
        assert f"schema/class/{name}/index.json" in written
        assert await test_storage.read_text(
            f"schema/class/{name}/index.json"
        ) == await test_storage.read_text(f"schema/class/{name}.json")
    for name in ["courseIdentifier", "duration", "homepage"]:
        assert f"schema/property/{name}/index.json" in written
        assert await test_storage.read_text(
            f"schema/property/{name}/index.json"
        ) == await test_storage.read_text(f"schema/property/{name}.json")

    assert not await test_storage.exists("schema/class/Course/index.ttl")


@pytest.mark.asyncio
async def test_generate_single_scope(
    generator: StaticSiteGenerator, test_storage: LocalStorageBackend
):
    written = await generator.generate(["property"])

    assert all(path.startswith("schema/property/") for path in written)
    assert not await test_storage.exists("schema/schema.json")


@pytest.mark.asyncio
async def test_generate_unknown_scope(generator: StaticSiteGenerator):
    with pytest.raises(ValidationException) as exc_info:
        await generator.generate(["classes"])

    assert exc_info.value.status_code == 400
    assert "vocabulary" in exc_info.value.details["allowed"]


def test_parse_scopes_defaults_to_all():
    assert [scope.value for scope in parse_scopes(None)] == ["vocabulary", "class", "property"]
