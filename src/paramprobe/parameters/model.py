"""Parameter capabilities consumed by the parameter commands.

A connection adapter supplies a :class:`ParameterSource`; the commands only
read from it. Values are produced on demand by each :class:`Parameter` and are
never cached here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional


class Parameter(ABC):
    """A named, device-held setting."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable key, unique within one source."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable description used in listings."""

    @property
    def hidable(self) -> bool:
        """True when the parameter is left out of the default listing."""
        return False

    @abstractmethod
    def value(self) -> Optional[str]:
        """Render the whole value, or None when there is none."""

    @abstractmethod
    def value_at(self, subparam: int) -> Optional[str]:
        """Render one entry of an indexed value, or None when there is none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ParameterSource(ABC):
    """Read access to the parameters of one connection."""

    @abstractmethod
    def get_parameters(self) -> List[Parameter]:
        """Return every parameter; may raise whatever the connection raises."""

    def get_parameter(self, name: str) -> Optional[Parameter]:
        for parameter in self.get_parameters():
            if parameter.name == name:
                return parameter
        return None


def format_value(value: Any) -> Optional[str]:
    """Turn a raw device value into its textual form.

    ``None`` stays ``None`` (no value). Booleans become ``true``/``false``,
    sequences and mappings are flattened into comma-separated text.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(_format_item(item) for item in value)
    if isinstance(value, Mapping):
        return ", ".join(f"{key}={_format_item(item)}" for key, item in value.items())
    return str(value)


def _format_item(item: Any) -> str:
    text = format_value(item)
    return "" if text is None else text


def sort_by_name(parameters: Iterable[Parameter]) -> List[Parameter]:
    return sorted(parameters, key=lambda parameter: parameter.name)


__all__ = ["Parameter", "ParameterSource", "format_value", "sort_by_name"]
