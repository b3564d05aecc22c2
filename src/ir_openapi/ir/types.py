"""IR models for type references and type declarations.

A ``TypeReference`` is the use-site of a type (a property's value type, a list
element, ...). A ``TypeDeclaration`` is a named definition whose ``shape`` is an
alias, enum, object or union.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Discriminator, Tag

from .base import DeclaredTypeName, IrModel, get_variant_tag, tag_field


class PrimitiveType(str, Enum):
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    INTEGER = "INTEGER"
    LONG = "LONG"
    DOUBLE = "DOUBLE"
    DATE_TIME = "DATE_TIME"
    UUID = "UUID"


# --- type references ---


class PrimitiveTypeReference(IrModel):
    type: Literal["primitive"] = tag_field("primitive")
    primitive: PrimitiveType


class NamedTypeReference(DeclaredTypeName):
    """A pointer to a declared type. Carries the declared name inline."""

    type: Literal["named"] = tag_field("named")


class UnknownTypeReference(IrModel):
    type: Literal["unknown"] = tag_field("unknown")


class VoidTypeReference(IrModel):
    type: Literal["void"] = tag_field("void")


class ListType(IrModel):
    type: Literal["list"] = tag_field("list")
    list: "TypeReference"


class SetType(IrModel):
    type: Literal["set"] = tag_field("set")
    set: "TypeReference"


class MapType(IrModel):
    type: Literal["map"] = tag_field("map")
    key_type: "TypeReference"
    value_type: "TypeReference"


class OptionalType(IrModel):
    type: Literal["optional"] = tag_field("optional")
    optional: "TypeReference"


ContainerType = Annotated[
    Union[
        Annotated[ListType, Tag("list")],
        Annotated[SetType, Tag("set")],
        Annotated[MapType, Tag("map")],
        Annotated[OptionalType, Tag("optional")],
    ],
    Discriminator(get_variant_tag),
]


class ContainerTypeReference(IrModel):
    type: Literal["container"] = tag_field("container")
    container: ContainerType


TypeReference = Annotated[
    Union[
        Annotated[PrimitiveTypeReference, Tag("primitive")],
        Annotated[ContainerTypeReference, Tag("container")],
        Annotated[NamedTypeReference, Tag("named")],
        Annotated[UnknownTypeReference, Tag("unknown")],
        Annotated[VoidTypeReference, Tag("void")],
    ],
    Discriminator(get_variant_tag),
]

for _model in (ListType, SetType, MapType, OptionalType, ContainerTypeReference):
    _model.model_rebuild()


# --- type declarations ---


class AliasTypeDeclaration(IrModel):
    type: Literal["alias"] = tag_field("alias")
    alias_of: TypeReference


class EnumValue(IrModel):
    value: str
    docs: str | None = None


class EnumTypeDeclaration(IrModel):
    type: Literal["enum"] = tag_field("enum")
    values: list[EnumValue]


class ObjectProperty(IrModel):
    key: str
    value_type: TypeReference
    docs: str | None = None


class ObjectTypeDeclaration(IrModel):
    type: Literal["object"] = tag_field("object")
    extends: list[DeclaredTypeName] = []
    properties: list[ObjectProperty] = []


class SingleUnionType(IrModel):
    discriminant_value: str
    value_type: TypeReference
    docs: str | None = None


class UnionTypeDeclaration(IrModel):
    type: Literal["union"] = tag_field("union")
    discriminant: str
    types: list[SingleUnionType] = []


TypeShape = Annotated[
    Union[
        Annotated[AliasTypeDeclaration, Tag("alias")],
        Annotated[EnumTypeDeclaration, Tag("enum")],
        Annotated[ObjectTypeDeclaration, Tag("object")],
        Annotated[UnionTypeDeclaration, Tag("union")],
    ],
    Discriminator(get_variant_tag),
]


class TypeDeclaration(IrModel):
    """A named, documented type definition."""

    name: DeclaredTypeName
    docs: str | None = None
    shape: TypeShape
