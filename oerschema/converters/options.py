"""
Options shared by every converter.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from oerschema.converters.context import DEFAULT_BASE_URL


class ConversionOptions(BaseModel):
    """Per-call conversion settings."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Namespace for local vocabulary terms, must end with '/'",
    )
    pretty: bool = Field(
        default=False,
        description="Indent JSON family output with two spaces",
    )


def dump_json(data: Any, options: ConversionOptions) -> str:
    """Serialize with two-space indentation when pretty, fully compact otherwise."""
    if options.pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
