"""
Filter Pipeline
===============

Bounded Context: Delivery Decision

Applies a set of event filters to a stream of AttributeEvents and decides
which events proceed to delivery. Non-matching events are dropped silently.

Design:
- MatchMode.ALL: conjunction of filter results
- MatchMode.ANY: disjunction of filter results
- Evaluation order is unspecified (short-circuits)
- Synchronous, CPU-only, no shared mutable state

Message Flow:
    Producer → AttributeEvent → FilterPipeline.select() → Delivery
"""

from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from meridian_model import AttributeEvent

from .filters import EventFilter
from .logging import LogEvent, StructuredLogger


class MatchMode(str, Enum):
    """How filter results combine."""
    ALL = "ALL"
    ANY = "ANY"


class FilterPipeline:
    """
    Immutable set of filters combined with a MatchMode.

    An empty ALL pipeline matches every event; an empty ANY pipeline
    matches none.

    Attributes:
        filters: Filters to apply
        mode: Combination mode (default: ALL)
        logger: Optional structured logger for per-event DEBUG decisions

    Thread Safety:
        Safe to share between threads; apply() reads immutable state only.

    Example:
        >>> pipeline = FilterPipeline(
        ...     [EntityIdFilter(("pump-1",)), AttributePredicateFilter("running", BooleanPredicate(True))]
        ... )
        >>> delivered = list(pipeline.select(events))
    """

    def __init__(
        self,
        filters: Iterable[EventFilter] = (),
        mode: MatchMode = MatchMode.ALL,
        logger: Optional[StructuredLogger] = None
    ):
        self._filters: Tuple[EventFilter, ...] = tuple(filters)
        for event_filter in self._filters:
            if not isinstance(event_filter, EventFilter):
                raise TypeError(
                    f"filters must be EventFilter, got {type(event_filter).__name__}"
                )
        self._mode = MatchMode(mode)
        self.logger = logger

    @property
    def filters(self) -> Tuple[EventFilter, ...]:
        return self._filters

    @property
    def mode(self) -> MatchMode:
        return self._mode

    def apply(self, event: AttributeEvent) -> bool:
        """
        Decide delivery for one event.

        Args:
            event: Event to test

        Returns:
            True when the event should be delivered
        """
        if self._mode is MatchMode.ALL:
            matched = all(f.apply(event) for f in self._filters)
        else:
            matched = any(f.apply(event) for f in self._filters)

        if self.logger is not None:
            self.logger.debug(
                event=LogEvent.EVENT_MATCHED if matched else LogEvent.EVENT_DROPPED,
                message="Event delivered" if matched else "Event rejected by filters",
                metadata={
                    'attribute': str(event.attribute_ref),
                    'timestamp': event.timestamp,
                    'mode': self._mode.value,
                    'filter_count': len(self._filters),
                }
            )

        return matched

    def select(self, events: Iterable[AttributeEvent]) -> Iterator[AttributeEvent]:
        """Yield the events that pass the pipeline, in input order."""
        for event in events:
            if self.apply(event):
                yield event

    def mask(self, events: Sequence[AttributeEvent]) -> np.ndarray:
        """
        Batch decision.

        Returns:
            Boolean mask of shape (N,) where True = deliver
        """
        return np.array([self.apply(event) for event in events], dtype=bool)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterPipeline(mode={self._mode.value}, filters={len(self._filters)})"
