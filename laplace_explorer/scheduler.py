"""Coalescing of rapid parameter changes into at most one redraw per tick."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from laplace_explorer.catalog import SignalDefinition
from laplace_explorer.sampler import SampledViews, sample_views

__all__ = ["RedrawCoalescer"]

logger = logging.getLogger(__name__)


class RedrawCoalescer:
    """Keeps only the latest (definition, params) request until the next tick.

    ``submit`` may be called for every slider event; ``tick`` runs the
    sampler once for whatever was submitted last and discards the rest.
    """

    def __init__(self, sample: Callable[[SignalDefinition, Mapping[str, float]], SampledViews] = sample_views):
        self._sample = sample
        self._pending: Optional[Tuple[SignalDefinition, Mapping[str, float]]] = None
        self.dropped = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, definition: SignalDefinition, params: Mapping[str, float]) -> None:
        if self._pending is not None:
            self.dropped += 1
        # copy so later slider mutation cannot leak into the queued request
        self._pending = (definition, MappingProxyType(dict(params)))

    def tick(self) -> Optional[SampledViews]:
        if self._pending is None:
            return None
        definition, params = self._pending
        self._pending = None
        logger.debug("Redraw %s (%d intermediate states dropped so far)", definition.id, self.dropped)
        return self._sample(definition, params)
