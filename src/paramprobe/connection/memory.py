from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..parameters.model import Parameter, ParameterSource, format_value

IndexedValues = Union[Sequence[Any], Mapping]


class StaticParameter(Parameter):
    """A parameter whose raw value is already known.

    ``values`` holds the indexed entries, either as a list (indexed from 0)
    or as a mapping of integer sub-index to raw value.
    """

    def __init__(
        self,
        name: str,
        label: Optional[str] = None,
        *,
        hidable: bool = False,
        value: Any = None,
        values: Optional[IndexedValues] = None,
    ) -> None:
        self._name = name
        self._label = label or name
        self._hidable = hidable
        self._value = value
        self._values = values

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def hidable(self) -> bool:
        return self._hidable

    def value(self) -> Optional[str]:
        return format_value(self._value)

    def value_at(self, subparam: int) -> Optional[str]:
        if self._values is None:
            return None
        if isinstance(self._values, Mapping):
            return format_value(self._values.get(subparam))
        if 0 <= subparam < len(self._values):
            return format_value(self._values[subparam])
        return None


class MemoryParameterSource(ParameterSource):
    """Parameters held in memory, keyed by name."""

    def __init__(self, parameters: Iterable[Parameter] = ()) -> None:
        self._parameters: Dict[str, Parameter] = {}
        for parameter in parameters:
            self.add(parameter)

    def add(self, parameter: Parameter) -> None:
        if parameter.name in self._parameters:
            raise ValueError(f"Duplicate parameter name: {parameter.name}")
        self._parameters[parameter.name] = parameter

    def get_parameters(self) -> List[Parameter]:
        return list(self._parameters.values())

    def get_parameter(self, name: str) -> Optional[Parameter]:
        return self._parameters.get(name)

    def __len__(self) -> int:
        return len(self._parameters)
