"""The ``list-parameters`` command, independent of any CLI framework."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from .listing import iter_listing
from .lookup import find_parameter
from .model import ParameterSource
from .query import ListAll, NamedQuery, Query, resolve_arguments
from .render import require_value

logger = logging.getLogger(__name__)


class ListParametersCommand:
    """List all visible parameters, or print the value of one of them.

    ``run`` yields output lines. A listing streams its lines as they are
    rendered; a named query yields its single line only once the value is
    known, so a failure never leaves partial output behind.
    """

    def __init__(self, source: ParameterSource):
        self.source = source

    def run(self, tokens: Sequence[str]) -> Iterator[str]:
        query = resolve_arguments(tokens)
        return self.execute(query)

    def execute(self, query: Query) -> Iterator[str]:
        if isinstance(query, ListAll):
            return iter_listing(self.source)
        if isinstance(query, NamedQuery):
            return iter([self.query_value(query)])
        raise TypeError(f"Unsupported query: {query!r}")

    def query_value(self, query: NamedQuery) -> str:
        logger.debug("Querying %s", query.target)
        parameter = find_parameter(self.source, query.name)
        return require_value(parameter, query.subparam)
