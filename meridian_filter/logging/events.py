"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging of the filtering core.

Event Naming Convention:
    <component>.<category>.<action>

    component: pipeline, config, error
    category: event, subscriptions
    action: matched, dropped, loaded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.attribute
    | filter event = "pipeline.event.dropped"
    | stats count() by metadata.attribute
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - pipeline.*: Filter pipeline decisions
    - config.*: Filter configuration loading
    - error.*: Error conditions
    """

    # ========== Pipeline Events ==========
    EVENT_MATCHED = "pipeline.event.matched"
    """Event passed the filter pipeline and proceeds to delivery."""

    EVENT_DROPPED = "pipeline.event.dropped"
    """Event rejected by the filter pipeline."""

    # ========== Config Events ==========
    SUBSCRIPTIONS_LOADED = "config.subscriptions.loaded"
    """Subscription filters loaded from configuration."""

    # ========== Error Events ==========
    DESERIALIZATION_ERROR = "error.deserialization"
    """Failed to decode a predicate or filter from its wire form."""

    CONFIG_ERROR = "error.config"
    """Filter configuration file could not be loaded."""
