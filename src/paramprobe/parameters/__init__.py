"""Parameter resolution, rendering and listing."""

from .command import ListParametersCommand
from .listing import iter_listing
from .lookup import find_parameter
from .model import Parameter, ParameterSource, format_value, sort_by_name
from .query import ListAll, NamedQuery, Query, resolve_arguments
from .render import render_value, require_value

__all__ = [
    "ListParametersCommand",
    "ListAll",
    "NamedQuery",
    "Parameter",
    "ParameterSource",
    "Query",
    "find_parameter",
    "format_value",
    "iter_listing",
    "render_value",
    "require_value",
    "resolve_arguments",
    "sort_by_name",
]
