"""IR file loader.

Reads a Fern-style IR document (YAML or JSON; JSON is valid YAML) into an
IntermediateRepresentation model.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ir_openapi.errors import IrLoadError
from .document import IntermediateRepresentation

logger = logging.getLogger(__name__)


def load_ir(file_path: Path) -> IntermediateRepresentation:
    """Parse an IR file into an IntermediateRepresentation."""
    text = file_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise IrLoadError(file_path, f"not valid YAML/JSON ({e})") from e

    if not isinstance(data, dict):
        raise IrLoadError(file_path, f"expected a mapping at top level, got {type(data).__name__}")

    try:
        ir = IntermediateRepresentation.model_validate(data)
    except ValidationError as e:
        raise IrLoadError(file_path, str(e)) from e

    logger.debug("Loaded %d type declarations from %s", len(ir.types), file_path)
    return ir
