"""Positional argument handling for ``list-parameters``.

The command accepts ``[PARAMETER [SUBPARAM]]``. Each arity gets its own
branch; the subparam is only parsed when a second token is present.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..errors import ArgumentSyntaxError, TooManyParametersError

logger = logging.getLogger(__name__)

MAX_PARAMETERS = 2

# Signed 64-bit range accepted by the device API
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class ListAll:
    """List every visible parameter."""


@dataclass(frozen=True)
class NamedQuery:
    name: str
    subparam: Optional[int] = None

    @property
    def target(self) -> str:
        if self.subparam is None:
            return self.name
        return f"{self.name}[{self.subparam}]"


Query = Union[ListAll, NamedQuery]


def parse_integer(field: str, text: str) -> int:
    """Parse an optionally signed run of ASCII digits within the signed 64-bit range."""
    digits = text.strip()
    if not INTEGER_PATTERN.fullmatch(digits):
        raise ArgumentSyntaxError(field, text)
    value = int(digits)
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise ArgumentSyntaxError(field, text)
    return value


def resolve_arguments(tokens: Sequence[str]) -> Query:
    tokens = tuple(tokens)
    count = len(tokens)

    if count == 0:
        query: Query = ListAll()
    elif count == 1:
        query = NamedQuery(tokens[0])
    elif count == 2:
        query = NamedQuery(tokens[0], parse_integer("subparam", tokens[1]))
    else:
        raise TooManyParametersError(tokens, MAX_PARAMETERS)

    logger.debug("Resolved %r into %r", tokens, query)
    return query


__all__ = ["ListAll", "NamedQuery", "Query", "MAX_PARAMETERS", "parse_integer", "resolve_arguments"]
