"""
Vocabulary data model.

Immutable pydantic models for the OER Schema vocabulary. Field names are
snake_case in Python and camelCase on the wire (the YAML definition and the
raw JSON dump), both names are accepted when validating.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_list(value: Any) -> Any:
    """Normalize a missing or scalar reference field to a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class VocabularyClass(BaseModel):
    """A class (rdfs:Class) in the vocabulary."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    label: str | None = None
    comment: str | None = None
    sub_class_of: list[str] = Field(default_factory=list, alias="subClassOf")
    properties: list[str] = Field(default_factory=list)
    alternate_type: str | None = Field(default=None, alias="alternateType")
    category: str | None = Field(default=None, alias="schema")

    @field_validator("sub_class_of", "properties", mode="before")
    @classmethod
    def normalize_references(cls, v: Any) -> Any:
        return _as_list(v)


class VocabularyProperty(BaseModel):
    """A property (rdf:Property) in the vocabulary."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    label: str | None = None
    comment: str | None = None
    domain: list[str] = Field(default_factory=list)
    range: list[str] = Field(default_factory=list)
    inverse_of: str | None = Field(default=None, alias="inverseOf")
    alternate_type: str | None = Field(default=None, alias="alternateType")
    base_vocab: str | None = Field(default=None, alias="baseVocab")

    @field_validator("domain", "range", mode="before")
    @classmethod
    def normalize_references(cls, v: Any) -> Any:
        return _as_list(v)


class Vocabulary(BaseModel):
    """
    The complete vocabulary.

    ``classes`` and ``properties`` keep declaration order; converters rely on
    it for the whole-vocabulary output order.
    """

    model_config = ConfigDict(frozen=True)

    version: str = ""
    classes: dict[str, VocabularyClass] = Field(default_factory=dict)
    properties: dict[str, VocabularyProperty] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> str:
        """YAML reads versions like 1.0 as floats."""
        return "" if v is None else str(v)

    @field_validator("classes", "properties", mode="before")
    @classmethod
    def inject_names(cls, v: Any) -> Any:
        """Populate each entry's name from its mapping key."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        entries = {}
        for key, entry in v.items():
            key = str(key)
            if entry is None:
                entry = {}
            if isinstance(entry, dict):
                entry = {**entry, "name": key}
            entries[key] = entry
        return entries
