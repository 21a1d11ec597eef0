"""
Vocabulary service - entity lookup and rendering.
Sits between the HTTP/static layers and the pure converters.
"""

import logging
from typing import Any, NamedTuple

from oerschema.converters import ConversionOptions, EntityScope, OutputFormat, select_converter
from oerschema.core.exceptions import EntityNotFoundException
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty

logger = logging.getLogger(__name__)


class RenderedDocument(NamedTuple):
    """Serialized entity with the format actually used."""

    content: str
    content_type: str
    format: OutputFormat


class VocabularyService:
    """Read-only operations over a loaded vocabulary."""

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary

    def get_class(self, name: str) -> VocabularyClass:
        """
        Get a class by name.

        Raises:
            EntityNotFoundException: If the class does not exist
        """
        class_data = self.vocabulary.classes.get(name)
        if class_data is None:
            logger.debug(f"Class not found: {name}")
            raise EntityNotFoundException("class", name)
        return class_data

    def get_property(self, name: str) -> VocabularyProperty:
        """
        Get a property by name.

        Raises:
            EntityNotFoundException: If the property does not exist
        """
        property_data = self.vocabulary.properties.get(name)
        if property_data is None:
            logger.debug(f"Property not found: {name}")
            raise EntityNotFoundException("property", name)
        return property_data

    def domain_properties(self, class_name: str) -> list[str]:
        """Names of properties whose domain includes the class, in declaration order."""
        return [
            name
            for name, prop in self.vocabulary.properties.items()
            if class_name in prop.domain
        ]

    def class_index(self, url_prefix: str = "/schema/class") -> list[dict[str, Any]]:
        """Summaries of all classes in declaration order."""
        return [
            {"name": name, "label": cls.label or name, "url": f"{url_prefix}/{name}"}
            for name, cls in self.vocabulary.classes.items()
        ]

    def property_index(self, url_prefix: str = "/schema/property") -> list[dict[str, Any]]:
        """Summaries of all properties in declaration order."""
        return [
            {"name": name, "label": prop.label or name, "url": f"{url_prefix}/{name}"}
            for name, prop in self.vocabulary.properties.items()
        ]

    def render_vocabulary(
        self,
        requested_format: str | OutputFormat | None,
        options: ConversionOptions,
    ) -> RenderedDocument:
        """Serialize the whole vocabulary in the negotiated format."""
        converter = select_converter(EntityScope.VOCABULARY, requested_format)
        content = converter.function(self.vocabulary, options)
        return RenderedDocument(content, converter.content_type, converter.format)

    def render_class(
        self,
        name: str,
        requested_format: str | OutputFormat | None,
        options: ConversionOptions,
        domain_properties: bool = False,
    ) -> RenderedDocument:
        """
        Serialize one class in the negotiated format.

        The lookup happens before conversion, so an unknown name produces no
        output at all. With domain_properties, the class's property list is
        replaced by the properties whose domain names the class.

        Raises:
            EntityNotFoundException: If the class does not exist
        """
        class_data = self.get_class(name)
        if domain_properties:
            class_data = class_data.model_copy(
                update={"properties": self.domain_properties(name)}
            )
        converter = select_converter(EntityScope.CLASS, requested_format)
        content = converter.function(name, class_data, options, self.vocabulary)
        return RenderedDocument(content, converter.content_type, converter.format)

    def render_property(
        self,
        name: str,
        requested_format: str | OutputFormat | None,
        options: ConversionOptions,
    ) -> RenderedDocument:
        """
        Serialize one property in the negotiated format.

        Raises:
            EntityNotFoundException: If the property does not exist
        """
        property_data = self.get_property(name)
        converter = select_converter(EntityScope.PROPERTY, requested_format)
        content = converter.function(name, property_data, options, self.vocabulary)
        return RenderedDocument(content, converter.content_type, converter.format)
