from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TypeKind(str, Enum):
    STRING_LITERAL = "string_literal"
    NUMERIC_LITERAL = "numeric_literal"
    DATA_TYPE = "data_type"
    PROPERTY_REFERENCE = "property_reference"
    LENGTH = "length"
    TIME = "time"
    NUMBER = "number"
    STRING = "string"


class ResolvedType(BaseModel):
    """One concrete kind of value a property accepts.

    `value` carries the literal for keyword kinds and the referenced name for
    data type and property references; basic kinds leave it empty.
    """

    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    value: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is TypeKind.DATA_TYPE:
            return f"<{self.value}>"
        if self.kind is TypeKind.PROPERTY_REFERENCE:
            return f"<'{self.value}'>"
        if self.value is not None:
            return self.value
        return self.kind.value


LENGTH = ResolvedType(kind=TypeKind.LENGTH)
TIME = ResolvedType(kind=TypeKind.TIME)
NUMBER = ResolvedType(kind=TypeKind.NUMBER)
STRING = ResolvedType(kind=TypeKind.STRING)


def string_literal(value: str) -> ResolvedType:
    return ResolvedType(kind=TypeKind.STRING_LITERAL, value=value)


def numeric_literal(value: str) -> ResolvedType:
    return ResolvedType(kind=TypeKind.NUMERIC_LITERAL, value=value)


def data_type(name: str) -> ResolvedType:
    return ResolvedType(kind=TypeKind.DATA_TYPE, value=name)


def property_reference(name: str) -> ResolvedType:
    return ResolvedType(kind=TypeKind.PROPERTY_REFERENCE, value=name)
