"""
Static site generation.

Pre-renders the vocabulary, every class and every property in every format
the scope supports, plus JSON indexes of classes and properties:

    schema/schema.{ext}
    schema/class/index.json
    schema/class/{Name}.{ext}
    schema/class/{Name}/index.json
    schema/property/index.json
    schema/property/{name}.{ext}
    schema/property/{name}/index.json

Static class JSON lists every property whose domain includes the class,
rather than the properties declared on the class itself. The JSON document
of each term is also written as {name}/index.json so directory-style URLs
resolve on plain file hosts.
"""

import asyncio
import logging
from typing import Iterable

from oerschema.converters import (
    ConversionOptions,
    EntityScope,
    OutputFormat,
    file_extension_for,
    supported_formats,
)
from oerschema.converters.options import dump_json
from oerschema.core.exceptions import ValidationException
from oerschema.models.vocabulary import Vocabulary
from oerschema.services.vocabulary_service import VocabularyService
from oerschema.storage.base import StorageBackend

logger = logging.getLogger(__name__)

OUTPUT_ROOT = "schema"


def parse_scopes(scopes: Iterable[str] | None) -> list[EntityScope]:
    """
    Validate requested scope names.

    Raises:
        ValidationException: If a scope name is unknown
    """
    if not scopes:
        return list(EntityScope)

    parsed = []
    for scope in scopes:
        try:
            parsed.append(EntityScope(scope))
        except ValueError:
            raise ValidationException(
                message=f"Unknown scope: {scope}",
                details={"allowed": [s.value for s in EntityScope]},
            )
    return parsed


class StaticSiteGenerator:
    """Writes every entity in every supported format through a storage backend."""

    def __init__(
        self,
        vocabulary: Vocabulary,
        storage: StorageBackend,
        options: ConversionOptions | None = None,
    ):
        self.service = VocabularyService(vocabulary)
        self.storage = storage
        self.options = options or ConversionOptions()

    async def generate(self, scopes: Iterable[str] | None = None) -> list[str]:
        """
        Render and write the static site.

        Args:
            scopes: Subset of "vocabulary", "class", "property". All when omitted

        Returns:
            Written storage paths, in generation order

        Raises:
            ValidationException: If a scope name is unknown
            StorageException: If a write fails
        """
        selected = parse_scopes(scopes)
        written: list[str] = []

        if EntityScope.VOCABULARY in selected:
            written.extend(await self._write_vocabulary())
        if EntityScope.CLASS in selected:
            written.extend(await self._write_classes())
        if EntityScope.PROPERTY in selected:
            written.extend(await self._write_properties())

        logger.info(f"Static generation complete: {len(written)} files")
        return written

    async def _write_all(self, documents: dict[str, str]) -> list[str]:
        return list(
            await asyncio.gather(
                *(self.storage.write_text(path, content) for path, content in documents.items())
            )
        )

    async def _write_vocabulary(self) -> list[str]:
        documents = {}
        for fmt in supported_formats(EntityScope.VOCABULARY):
            rendered = self.service.render_vocabulary(fmt, self.options)
            documents[f"{OUTPUT_ROOT}/schema.{file_extension_for(fmt)}"] = rendered.content

        paths = await self._write_all(documents)
        logger.info(f"Wrote whole vocabulary in {len(paths)} formats")
        return paths

    async def _write_classes(self) -> list[str]:
        prefix = f"{OUTPUT_ROOT}/class"
        documents = {f"{prefix}/index.json": dump_json(self.service.class_index(f"/{prefix}"), self.options)}

        formats = supported_formats(EntityScope.CLASS)
        for name in self.service.vocabulary.classes:
            for fmt in formats:
                rendered = self.service.render_class(
                    name, fmt, self.options, domain_properties=fmt is OutputFormat.JSON
                )
                documents[f"{prefix}/{name}.{file_extension_for(fmt)}"] = rendered.content
                if fmt is OutputFormat.JSON:
                    documents[f"{prefix}/{name}/index.json"] = rendered.content

        paths = await self._write_all(documents)
        logger.info(f"Wrote {len(self.service.vocabulary.classes)} classes ({len(paths)} files)")
        return paths

    async def _write_properties(self) -> list[str]:
        prefix = f"{OUTPUT_ROOT}/property"
        documents = {
            f"{prefix}/index.json": dump_json(self.service.property_index(f"/{prefix}"), self.options)
        }

        formats = supported_formats(EntityScope.PROPERTY)
        for name in self.service.vocabulary.properties:
            for fmt in formats:
                rendered = self.service.render_property(name, fmt, self.options)
                documents[f"{prefix}/{name}.{file_extension_for(fmt)}"] = rendered.content
                if fmt is OutputFormat.JSON:
                    documents[f"{prefix}/{name}/index.json"] = rendered.content

        paths = await self._write_all(documents)
        logger.info(
            f"Wrote {len(self.service.vocabulary.properties)} properties ({len(paths)} files)"
        )
        return paths
