from __future__ import annotations

from ..errors import UnknownParameterError
from .model import Parameter, ParameterSource


def find_parameter(source: ParameterSource, name: str) -> Parameter:
    """Return the parameter called ``name``, hidable or not."""
    parameter = source.get_parameter(name)
    if parameter is None:
        raise UnknownParameterError(name)
    return parameter
