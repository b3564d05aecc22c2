"""Components assembler: a whole IR -> OpenAPI ``components`` + ``security``."""

import logging

from ir_openapi.ir.document import IntermediateRepresentation
from .security import construct_security_requirements, construct_security_schemes
from .types import convert_type

logger = logging.getLogger(__name__)


def build_components(ir: IntermediateRepresentation) -> dict:
    """Convert every declaration and the API auth into a document fragment.

    Returns ``{"components": {"schemas": ..., "securitySchemes": ...},
    "security": ...}``. The security parts are left out when the IR declares
    no auth. Two declarations that resolve to the same schema name keep the
    later one.
    """
    schemas: dict[str, dict] = {}
    for type_declaration in ir.types:
        converted = convert_type(type_declaration)
        if converted.schema_name in schemas:
            logger.warning(
                "Schema name %s is produced by more than one declaration; keeping the last one",
                converted.schema_name,
            )
        logger.debug("Converted %s", converted.schema_name)
        schemas[converted.schema_name] = converted.openapi_schema

    components: dict = {"schemas": schemas}
    fragment: dict = {"components": components}
    if ir.auth is not None:
        components["securitySchemes"] = construct_security_schemes(ir.auth)
        fragment["security"] = construct_security_requirements(ir.auth)
    return fragment
