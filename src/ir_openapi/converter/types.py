"""IR type -> OpenAPI v3 schema conversion.

Every function here is pure. Named type references always become ``$ref``
pointers and are never expanded, so the recursion terminates even when the
declared type graph has cycles.
"""

from pydantic import BaseModel, ConfigDict

from ir_openapi.errors import UnknownVariantError
from ir_openapi.ir.types import (
    AliasTypeDeclaration,
    ContainerTypeReference,
    EnumTypeDeclaration,
    ListType,
    MapType,
    NamedTypeReference,
    ObjectTypeDeclaration,
    OptionalType,
    PrimitiveType,
    PrimitiveTypeReference,
    SetType,
    TypeDeclaration,
    UnionTypeDeclaration,
    UnknownTypeReference,
    VoidTypeReference,
)
from .naming import get_schema_name, get_schema_reference

PRIMITIVE_SCHEMAS: dict[PrimitiveType, dict] = {
    PrimitiveType.BOOLEAN: {"type": "boolean"},
    PrimitiveType.STRING: {"type": "string"},
    PrimitiveType.DATE_TIME: {"type": "string", "format": "date-time"},
    PrimitiveType.DOUBLE: {"type": "number", "format": "double"},
    PrimitiveType.INTEGER: {"type": "integer"},
    PrimitiveType.LONG: {"type": "integer", "format": "int64"},
    PrimitiveType.UUID: {"type": "string", "format": "uuid"},
}


class ConvertedType(BaseModel):
    """A converted declaration, ready for ``components.schemas[schema_name]``."""

    model_config = ConfigDict(frozen=True)

    schema_name: str
    openapi_schema: dict


def convert_type(type_declaration: TypeDeclaration) -> ConvertedType:
    """Convert one type declaration into its named component schema."""
    shape = type_declaration.shape
    docs = type_declaration.docs

    if isinstance(shape, AliasTypeDeclaration):
        openapi_schema = convert_alias(shape, docs)
    elif isinstance(shape, EnumTypeDeclaration):
        openapi_schema = convert_enum(shape, docs)
    elif isinstance(shape, ObjectTypeDeclaration):
        openapi_schema = convert_object(shape, docs)
    elif isinstance(shape, UnionTypeDeclaration):
        openapi_schema = convert_union(shape, docs)
    else:
        raise UnknownVariantError("type shape", shape)

    return ConvertedType(
        schema_name=get_schema_name(type_declaration.name),
        openapi_schema=openapi_schema,
    )


def convert_alias(alias_declaration: AliasTypeDeclaration, docs: str | None) -> dict:
    return _with_description(convert_type_reference(alias_declaration.alias_of), docs)


def convert_enum(enum_declaration: EnumTypeDeclaration, docs: str | None) -> dict:
    return _with_description(
        {
            "type": "string",
            "enum": [enum_value.value for enum_value in enum_declaration.values],
        },
        docs,
    )


def convert_object(object_declaration: ObjectTypeDeclaration, docs: str | None) -> dict:
    """Convert an object, listing non-optional properties as required.

    Supertypes are referenced through ``allOf`` next to the object's own
    ``properties``; nothing is inlined from them.
    """
    properties = {}
    required = []
    for object_property in object_declaration.properties:
        converted = convert_type_reference(object_property.value_type)
        properties[object_property.key] = _with_description(converted, object_property.docs)
        if not _is_optional(object_property.value_type):
            required.append(object_property.key)

    schema = _with_description({"type": "object"}, docs)
    schema["properties"] = properties
    schema["required"] = required
    if object_declaration.extends:
        schema["allOf"] = [
            {"$ref": get_schema_reference(declared_type_name)}
            for declared_type_name in object_declaration.extends
        ]
    return schema


def convert_union(union_declaration: UnionTypeDeclaration, docs: str | None) -> dict:
    """Convert a discriminated union into ``oneOf``.

    Named variants merge the referenced type with a single-value enum holding
    the discriminant value. Every other variant puts its converted value type
    directly under the discriminant key, which drops the discriminant value.
    """
    discriminant = union_declaration.discriminant
    one_of = []
    for single_union_type in union_declaration.types:
        value_type = single_union_type.value_type
        if isinstance(value_type, NamedTypeReference):
            one_of.append({
                "type": "object",
                "allOf": [
                    {"$ref": get_schema_reference(value_type)},
                    {
                        "type": "object",
                        "properties": {
                            discriminant: {
                                "type": "string",
                                "enum": [single_union_type.discriminant_value],
                            },
                        },
                    },
                ],
            })
        else:
            one_of.append({
                "type": "object",
                "properties": {discriminant: convert_type_reference(value_type)},
            })

    return _with_description({"oneOf": one_of}, docs)


def convert_type_reference(type_reference) -> dict:
    """Convert a type reference into a schema object or ``$ref`` pointer."""
    if isinstance(type_reference, ContainerTypeReference):
        return _convert_container_type(type_reference.container)
    if isinstance(type_reference, NamedTypeReference):
        return {"$ref": get_schema_reference(type_reference)}
    if isinstance(type_reference, PrimitiveTypeReference):
        return _convert_primitive_type(type_reference.primitive)
    if isinstance(type_reference, (UnknownTypeReference, VoidTypeReference)):
        return {}
    raise UnknownVariantError("type reference", type_reference)


def _convert_primitive_type(primitive_type: PrimitiveType) -> dict:
    try:
        schema = PRIMITIVE_SCHEMAS[primitive_type]
    except KeyError:
        raise UnknownVariantError("primitive type", primitive_type) from None
    return dict(schema)


def _convert_container_type(container_type) -> dict:
    if isinstance(container_type, ListType):
        return {"type": "array", "items": convert_type_reference(container_type.list)}
    if isinstance(container_type, SetType):
        return {"type": "array", "items": convert_type_reference(container_type.set)}
    if isinstance(container_type, MapType):
        return {
            "type": "object",
            "additionalProperties": convert_type_reference(container_type.value_type),
        }
    if isinstance(container_type, OptionalType):
        return convert_type_reference(container_type.optional)
    raise UnknownVariantError("container type", container_type)


def _is_optional(type_reference) -> bool:
    return isinstance(type_reference, ContainerTypeReference) and isinstance(
        type_reference.container, OptionalType
    )


def _with_description(schema: dict, docs: str | None) -> dict:
    """Copy ``schema`` with ``description`` set to ``docs``, or removed when there are none."""
    result = {key: value for key, value in schema.items() if key != "description"}
    if docs is not None:
        result["description"] = docs
    return result
