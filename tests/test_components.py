import logging
from pathlib import Path

from ir_openapi.converter.components import build_components
from ir_openapi.ir.auth import ApiAuth, AuthSchemesRequirement, BasicAuthScheme
from ir_openapi.ir.base import DeclaredTypeName
from ir_openapi.ir.document import IntermediateRepresentation
from ir_openapi.ir.loader import load_ir
from ir_openapi.ir.types import EnumTypeDeclaration, EnumValue, TypeDeclaration

FIXTURES = Path(__file__).parent / "fixtures"


def _enum(path: list[str], name: str, values: list[str]) -> TypeDeclaration:
    return TypeDeclaration(
        name=DeclaredTypeName(fern_filepath=path, name=name),
        shape=EnumTypeDeclaration(values=[EnumValue(value=v) for v in values]),
    )


class TestBuildComponents:
    def test_fixture_fragment(self):
        fragment = build_components(load_ir(FIXTURES / "imdb.yaml"))
        schemas = fragment["components"]["schemas"]

        assert list(schemas) == ["ImdbMovieId", "ImdbGenre", "CommonsEntity", "ImdbMovie", "ImdbSearchResult"]
        assert schemas["ImdbMovieId"] == {"type": "string", "description": "Unique identifier of a movie."}
        assert schemas["ImdbMovie"] == {
            "type": "object",
            "description": "A movie.",
            "properties": {
                "id": {"$ref": "#/components/schemas/ImdbMovieId"},
                "title": {"type": "string", "description": "Display title."},
                "rating": {"type": "number", "format": "double"},
                "genres": {"type": "array", "items": {"$ref": "#/components/schemas/ImdbGenre"}},
            },
            "required": ["id", "title", "genres"],
            "allOf": [{"$ref": "#/components/schemas/CommonsEntity"}],
        }
        assert schemas["ImdbSearchResult"]["oneOf"][1] == {
            "type": "object",
            "properties": {"kind": {"type": "integer"}},
        }

        assert fragment["components"]["securitySchemes"] == {
            "BearerAuth": {"type": "http", "scheme": "bearer"},
            "ApiKeyAuth": {"type": "apiKey", "in": "header", "name": "X-API-Key"},
        }
        assert fragment["security"] == [{"BearerAuth": []}, {"ApiKeyAuth": []}]

    def test_no_auth_omits_security(self):
        fragment = build_components(IntermediateRepresentation(types=[_enum([], "Color", ["RED"])]))
        assert fragment == {"components": {"schemas": {"Color": {"type": "string", "enum": ["RED"]}}}}

    def test_empty_ir(self):
        assert build_components(IntermediateRepresentation()) == {"components": {"schemas": {}}}

    def test_auth_only(self):
        ir = IntermediateRepresentation(
            auth=ApiAuth(requirement=AuthSchemesRequirement.ALL, schemes=[BasicAuthScheme()])
        )
        fragment = build_components(ir)
        assert fragment["components"]["securitySchemes"] == {"BasicAuth": {"type": "http", "scheme": "basic"}}
        assert fragment["security"] == [{"BasicAuth": []}]

    def test_name_collision_keeps_last_and_warns(self, caplog):
        ir = IntermediateRepresentation(
            types=[
                _enum(["core", "models"], "user", ["A"]),
                _enum(["coreModels"], "user", ["B"]),
            ]
        )
        with caplog.at_level(logging.WARNING, logger="ir_openapi.converter.components"):
            fragment = build_components(ir)
        assert fragment["components"]["schemas"] == {"CoreModelsUser": {"type": "string", "enum": ["B"]}}
        assert "CoreModelsUser" in caplog.text
