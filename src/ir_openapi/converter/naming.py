"""Schema naming for declared types.

A declared type's schema name is built by joining its namespace path and leaf
name into one phrase and PascalCasing the phrase. Path boundaries and the word
boundaries inside each segment are treated the same way, so
``["core", "models"]`` + ``"user"`` and ``["coreModels"]`` + ``"user"`` both
become ``CoreModelsUser``.

Word splitting follows lodash's ``camelCase`` exactly (via pydash): accented
letters are deburred, apostrophes dropped, ordinals such as ``1st`` kept whole,
and non-Latin letters kept as words.
"""

import re

import pydash

from ir_openapi.ir.base import DeclaredTypeName

SCHEMA_REFERENCE_PREFIX = "#/components/schemas/"

_APOSTROPHES = re.compile(r"['’]")


def split_words(phrase: str) -> list[str]:
    return pydash.words(_APOSTROPHES.sub("", pydash.deburr(phrase)))


def pascal_case(phrase: str) -> str:
    """Normalize a phrase to PascalCase, e.g. ``"api key"`` -> ``"ApiKey"``."""
    return "".join(pydash.upper_first(word.lower()) for word in split_words(phrase))


def get_schema_name(declared_type_name: DeclaredTypeName) -> str:
    """Return the ``components.schemas`` key for a declared type."""
    name_tokens = [*declared_type_name.fern_filepath, declared_type_name.name]
    return pascal_case(" ".join(name_tokens))


def get_schema_reference(declared_type_name: DeclaredTypeName) -> str:
    return f"{SCHEMA_REFERENCE_PREFIX}{get_schema_name(declared_type_name)}"
