from __future__ import annotations

from enum import Enum
from typing import Optional

from ..exceptions import SchemaSyntaxError


class ValueType(str, Enum):
    """Primitive types a schema line can declare."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"

    def __str__(self) -> str:
        return self.value


# Exact tokens only: no aliases, no case folding.
ALLOWED_TYPE_TOKENS = tuple(t.value for t in ValueType)


def parse_type_token(token: str, line_number: Optional[int] = None) -> ValueType:
    """Map a schema type token to a ValueType.

    Raises:
        SchemaSyntaxError: If the token is not one of the recognized names.
    """
    for value_type in ValueType:
        if token == value_type.value:
            return value_type
    raise SchemaSyntaxError(
        f"unknown type '{token}'. Expected one of: {', '.join(ALLOWED_TYPE_TOKENS)}",
        line_number=line_number,
    )

