from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class Combinator(str, Enum):
    # https://drafts.csswg.org/css-values-4/#component-combinators
    # Declared from the loosest to the tightest binding.
    SINGLE_BAR = "|"
    DOUBLE_BAR = "||"
    DOUBLE_AMPERSAND = "&&"
    JUXTAPOSITION = " "


@dataclass(frozen=True)
class Multiplier:
    """Trailing `?`, `*`, `+`, `#` or `{A,B}` of a component.

    `max_count=None` means unbounded.
    """

    min_count: int = 1
    max_count: Optional[int] = 1
    comma_separated: bool = False

    @property
    def optional(self) -> bool:
        return self.min_count == 0

    @property
    def repeats(self) -> bool:
        return self.max_count is None or self.max_count > 1

    def __str__(self) -> str:
        if self.comma_separated:
            if (self.min_count, self.max_count) == (1, None):
                return "#"
            return "#" + self._range()
        if (self.min_count, self.max_count) == (0, 1):
            return "?"
        if (self.min_count, self.max_count) == (0, None):
            return "*"
        if (self.min_count, self.max_count) == (1, None):
            return "+"
        return self._range()

    def _range(self) -> str:
        if self.max_count == self.min_count:
            return "{%d}" % self.min_count
        if self.max_count is None:
            return "{%d,}" % self.min_count
        return "{%d,%d}" % (self.min_count, self.max_count)


@dataclass(frozen=True)
class Keyword:
    name: str
    multiplier: Optional[Multiplier] = None

    @property
    def numeric(self) -> bool:
        try:
            float(self.name)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        return self.name + str(self.multiplier or "")


@dataclass(frozen=True)
class DataType:
    name: str
    multiplier: Optional[Multiplier] = None

    def __str__(self) -> str:
        return "<%s>%s" % (self.name, self.multiplier or "")


@dataclass(frozen=True)
class PropertyReference:
    name: str
    multiplier: Optional[Multiplier] = None

    def __str__(self) -> str:
        return "<'%s'>%s" % (self.name, self.multiplier or "")


@dataclass(frozen=True)
class Literal:
    """Punctuation that has to appear verbatim, e.g. `,` `/` or `'['`."""

    value: str
    multiplier: Optional[Multiplier] = None

    def __str__(self) -> str:
        return self.value + str(self.multiplier or "")


@dataclass(frozen=True)
class Function:
    name: str
    arguments: "Group"
    multiplier: Optional[Multiplier] = None

    def __str__(self) -> str:
        return "%s( %s )%s" % (self.name, self.arguments, self.multiplier or "")


@dataclass(frozen=True)
class Group:
    combinator: Combinator = Combinator.JUXTAPOSITION
    members: Tuple["Entity", ...] = field(default_factory=tuple)
    multiplier: Optional[Multiplier] = None
    bracketed: bool = False

    def __str__(self) -> str:
        joiner = " " if self.combinator is Combinator.JUXTAPOSITION else " %s " % self.combinator.value
        body = joiner.join(str(m) for m in self.members)
        if self.bracketed:
            return "[ %s ]%s" % (body, self.multiplier or "")
        return body


Entity = Union[Keyword, DataType, PropertyReference, Literal, Function, Group]
