"""Rendering of parameter values.

``render_value`` is the plain read used by listings, where a missing value
is simply skipped. ``require_value`` is used when a parameter was requested
by name and turns a missing value into :class:`NoValueError`.
"""

from __future__ import annotations

from typing import Optional

from ..errors import NoValueError
from .model import Parameter


def render_value(parameter: Parameter, subparam: Optional[int] = None) -> Optional[str]:
    if subparam is None:
        return parameter.value()
    return parameter.value_at(subparam)


def require_value(parameter: Parameter, subparam: Optional[int] = None) -> str:
    value = render_value(parameter, subparam)
    if value is None:
        raise NoValueError(parameter.name, subparam)
    return value
