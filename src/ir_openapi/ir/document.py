"""Top-level IR container consumed by the components assembler."""

from .auth import ApiAuth
from .base import IrModel
from .types import TypeDeclaration


class IntermediateRepresentation(IrModel):
    """The parts of an API's IR that feed ``components`` and ``security``."""

    api_name: str | None = None
    types: list[TypeDeclaration] = []
    auth: ApiAuth | None = None
