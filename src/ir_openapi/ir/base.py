"""Shared building blocks for the IR models.

The IR arrives as Fern-style JSON/YAML: camelCase keys and a ``_type`` tag on
every variant. All models are frozen; the converters only ever read them.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IrModel(BaseModel):
    """Base for every IR model: camelCase aliases, immutable instances."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def get_variant_tag(value) -> str | None:
    """Read the ``_type`` tag from raw input or from an already-built model."""
    if isinstance(value, dict):
        return value.get("_type", value.get("type"))
    return getattr(value, "type", None)


class DeclaredTypeName(IrModel):
    """Identity of a declared type: its namespace path plus a leaf name."""

    fern_filepath: list[str] = []
    name: str


class NameAndWireValue(IrModel):
    """A human-facing name paired with the literal value sent on the wire."""

    wire_value: str
    name: str


def tag_field(tag: str):
    return Field(tag, alias="_type")
