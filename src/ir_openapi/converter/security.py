"""IR auth -> OpenAPI ``securitySchemes`` and ``security`` requirements."""

import logging

from ir_openapi.errors import UnknownVariantError
from ir_openapi.ir.auth import (
    ApiAuth,
    AuthSchemesRequirement,
    BasicAuthScheme,
    BearerAuthScheme,
    HeaderAuthScheme,
)
from .naming import pascal_case

logger = logging.getLogger(__name__)


def construct_security_requirements(api_auth: ApiAuth) -> list[dict[str, list]]:
    """Build the ``security`` array for the API's auth requirement.

    OpenAPI ANDs the keys of one requirement object and ORs the objects of
    the array, so ALL yields one object and ANY yields one object per scheme.
    """
    if api_auth.requirement == AuthSchemesRequirement.ALL:
        return [{get_auth_scheme_name(scheme): [] for scheme in api_auth.schemes}]
    if api_auth.requirement == AuthSchemesRequirement.ANY:
        return [{get_auth_scheme_name(scheme): []} for scheme in api_auth.schemes]
    raise UnknownVariantError("auth schemes requirement", api_auth.requirement)


def construct_security_schemes(api_auth: ApiAuth) -> dict[str, dict]:
    """Build ``components.securitySchemes``; a repeated name keeps the last scheme."""
    security_schemes: dict[str, dict] = {}
    for scheme in api_auth.schemes:
        name = get_auth_scheme_name(scheme)
        if name in security_schemes:
            logger.warning("Security scheme %s is declared more than once; keeping the last one", name)
        security_schemes[name] = _convert_auth_scheme(scheme)
    return security_schemes


def get_auth_scheme_name(scheme) -> str:
    if isinstance(scheme, BearerAuthScheme):
        return "BearerAuth"
    if isinstance(scheme, BasicAuthScheme):
        return "BasicAuth"
    if isinstance(scheme, HeaderAuthScheme):
        return f"{pascal_case(scheme.name.name)}Auth"
    raise UnknownVariantError("auth scheme", scheme)


def _convert_auth_scheme(scheme) -> dict:
    if isinstance(scheme, BearerAuthScheme):
        return {"type": "http", "scheme": "bearer"}
    if isinstance(scheme, BasicAuthScheme):
        return {"type": "http", "scheme": "basic"}
    if isinstance(scheme, HeaderAuthScheme):
        return {"type": "apiKey", "in": "header", "name": scheme.name.wire_value}
    raise UnknownVariantError("auth scheme", scheme)
