from __future__ import annotations

import logging
from typing import Iterator

from .model import ParameterSource, sort_by_name
from .render import render_value

logger = logging.getLogger(__name__)


def iter_listing(source: ParameterSource) -> Iterator[str]:
    """Yield ``<label>: <value>`` for every visible parameter that has a value.

    Hidable parameters are skipped and the rest come out sorted by name.
    A parameter without a value is left out rather than reported.
    """
    for parameter in sort_by_name(source.get_parameters()):
        if parameter.hidable:
            continue

        value = render_value(parameter)
        if value is None:
            logger.debug("Skipping %s: no value", parameter.name)
            continue

        yield f"{parameter.label}: {value}"
