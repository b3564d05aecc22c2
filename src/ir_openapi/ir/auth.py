"""IR models for API-wide authentication."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Discriminator, Tag

from .base import IrModel, NameAndWireValue, get_variant_tag, tag_field


class AuthSchemesRequirement(str, Enum):
    ALL = "ALL"  # every scheme at once
    ANY = "ANY"  # any single scheme


class BearerAuthScheme(IrModel):
    type: Literal["bearer"] = tag_field("bearer")
    docs: str | None = None


class BasicAuthScheme(IrModel):
    type: Literal["basic"] = tag_field("basic")
    docs: str | None = None


class HeaderAuthScheme(IrModel):
    """An API key sent in a request header."""

    type: Literal["header"] = tag_field("header")
    name: NameAndWireValue
    docs: str | None = None


AuthScheme = Annotated[
    Union[
        Annotated[BearerAuthScheme, Tag("bearer")],
        Annotated[BasicAuthScheme, Tag("basic")],
        Annotated[HeaderAuthScheme, Tag("header")],
    ],
    Discriminator(get_variant_tag),
]


class ApiAuth(IrModel):
    requirement: AuthSchemesRequirement
    schemes: list[AuthScheme]
    docs: str | None = None
