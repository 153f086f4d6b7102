"""Mutable parameter values for the active catalog entry."""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from laplace_explorer.catalog import SignalDefinition

__all__ = ["ParameterState"]

logger = logging.getLogger(__name__)


class ParameterState:
    """Current slider values, one entry per parameter of a definition.

    Every key of ``definition.parameter_spec`` is present from construction
    on, so evaluators can index ``params["a"]`` without fallbacks.  Values
    set outside ``[minimum, maximum]`` are clamped.
    """

    def __init__(self, definition: SignalDefinition):
        self._definition = definition
        self._values: Dict[str, float] = definition.defaults()

    @classmethod
    def for_definition(cls, definition: SignalDefinition) -> "ParameterState":
        return cls(definition)

    @property
    def definition(self) -> SignalDefinition:
        return self._definition

    def __getitem__(self, name: str) -> float:
        return self._values[name]

    def __contains__(self, name) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, ParameterState):
            return self._definition.id == other._definition.id and self._values == other._values
        return NotImplemented

    def __repr__(self):
        return f"ParameterState({self._definition.id!r}, {self._values})"

    def keys(self):
        return self._values.keys()

    def values(self):
        return self._values.values()

    def items(self):
        return self._values.items()

    def get(self, name: str, default=None):
        return self._values.get(name, default)

    def set(self, name: str, value: float) -> float:
        """Store *value* for *name*, clamped to the slider range. Returns the stored value."""
        spec = self._definition.parameter_spec.get(name)
        if spec is None:
            raise KeyError(
                f"Unknown parameter {name!r} for {self._definition.id!r}. "
                f"Valid names: {list(self._values)}"
            )
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Parameter {name!r} must be finite, got {value}")
        clamped = spec.clamp(value)
        if clamped != value:
            logger.debug("Clamped %s=%s to %s for %s", name, value, clamped, self._definition.id)
        self._values[name] = clamped
        return clamped

    __setitem__ = set

    def update(self, values: Mapping[str, float]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def reset(self) -> None:
        self._values = self._definition.defaults()

    def as_dict(self) -> Dict[str, float]:
        return dict(self._values)

    def snapshot(self) -> Mapping[str, float]:
        """Read-only copy, detached from later slider changes."""
        return MappingProxyType(dict(self._values))
