import pytest
from pydantic import ValidationError

from ir_openapi.ir.auth import ApiAuth, AuthSchemesRequirement, HeaderAuthScheme
from ir_openapi.ir.base import DeclaredTypeName
from ir_openapi.ir.document import IntermediateRepresentation
from ir_openapi.ir.types import (
    ContainerTypeReference,
    ListType,
    MapType,
    NamedTypeReference,
    ObjectTypeDeclaration,
    PrimitiveType,
    PrimitiveTypeReference,
    TypeDeclaration,
)


class TestTypeReferenceModels:
    def test_validate_primitive_from_wire_format(self):
        decl = TypeDeclaration.model_validate({
            "name": {"fernFilepath": ["core"], "name": "Id"},
            "shape": {"_type": "alias", "aliasOf": {"_type": "primitive", "primitive": "UUID"}},
        })
        assert decl.name.fern_filepath == ["core"]
        assert decl.docs is None
        assert isinstance(decl.shape.alias_of, PrimitiveTypeReference)
        assert decl.shape.alias_of.primitive is PrimitiveType.UUID

    def test_validate_nested_containers(self):
        decl = TypeDeclaration.model_validate({
            "name": {"fernFilepath": [], "name": "Index"},
            "shape": {
                "_type": "alias",
                "aliasOf": {
                    "_type": "container",
                    "container": {
                        "_type": "map",
                        "keyType": {"_type": "primitive", "primitive": "STRING"},
                        "valueType": {
                            "_type": "container",
                            "container": {"_type": "list", "list": {"_type": "named", "fernFilepath": ["a"], "name": "B"}},
                        },
                    },
                },
            },
        })
        map_type = decl.shape.alias_of.container
        assert isinstance(map_type, MapType)
        assert isinstance(map_type.value_type.container, ListType)
        named = map_type.value_type.container.list
        assert isinstance(named, NamedTypeReference)
        assert named.name == "B"

    def test_construct_by_field_name(self):
        ref = ContainerTypeReference(
            container=ListType(list=PrimitiveTypeReference(primitive=PrimitiveType.LONG))
        )
        assert ref.type == "container"
        assert ref.container.type == "list"

    def test_unknown_tag_rejected(self):
        with pytest.raises(ValidationError):
            TypeDeclaration.model_validate({
                "name": {"fernFilepath": [], "name": "X"},
                "shape": {"_type": "intersection"},
            })

    def test_missing_tag_rejected(self):
        with pytest.raises(ValidationError):
            ObjectTypeDeclaration.model_validate({
                "properties": [{"key": "a", "valueType": {"primitive": "STRING"}}],
            })

    def test_models_are_frozen(self):
        name = DeclaredTypeName(fern_filepath=["core"], name="User")
        with pytest.raises(ValidationError):
            name.name = "Other"


class TestAuthModels:
    def test_validate_header_scheme(self):
        auth = ApiAuth.model_validate({
            "requirement": "ANY",
            "schemes": [{"_type": "header", "name": {"wireValue": "X-Key", "name": "apiKey"}}],
        })
        assert auth.requirement is AuthSchemesRequirement.ANY
        assert isinstance(auth.schemes[0], HeaderAuthScheme)
        assert auth.schemes[0].name.wire_value == "X-Key"

    def test_unknown_scheme_rejected(self):
        with pytest.raises(ValidationError):
            ApiAuth.model_validate({"requirement": "ALL", "schemes": [{"_type": "oauth"}]})

    def test_missing_requirement_rejected(self):
        with pytest.raises(ValidationError):
            ApiAuth.model_validate({"schemes": [{"_type": "bearer"}, {"_type": "basic"}]})

    def test_missing_schemes_rejected(self):
        with pytest.raises(ValidationError):
            ApiAuth.model_validate({"requirement": "ANY"})


class TestIntermediateRepresentation:
    def test_defaults(self):
        ir = IntermediateRepresentation()
        assert ir.types == []
        assert ir.auth is None
