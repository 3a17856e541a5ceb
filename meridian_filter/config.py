"""
Configuration schema for event filter subscriptions.

This module defines the configuration structure that binds subscriptions
to their filters and match mode. Filters use their wire form and are
decoded through FILTER_REGISTRY, so every registered filterType (and every
registered predicateType inside it) can be configured.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .filters import EventFilter, decode_filter
from .logging import LogEvent, StructuredLogger, create_logger
from .pipeline import FilterPipeline, MatchMode
from .registry import DeserializationError


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class SubscriptionConfig:
    """Filters of one subscription and how their results combine."""

    subscription_id: str
    match: MatchMode = MatchMode.ALL
    filters: Tuple[EventFilter, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate subscription configuration and freeze the filter list."""
        if not self.subscription_id:
            raise ValueError("subscription_id cannot be empty")
        object.__setattr__(self, 'filters', tuple(self.filters))
        object.__setattr__(self, 'match', MatchMode(self.match))

    def build_pipeline(self, logger: Optional[StructuredLogger] = None) -> FilterPipeline:
        """Create the FilterPipeline for this subscription."""
        return FilterPipeline(self.filters, mode=self.match, logger=logger)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubscriptionConfig":
        """
        Build from a mapping.

        Raises:
            ValueError: If fields are missing or a filter cannot be decoded
        """
        try:
            return cls(
                subscription_id=data["subscription_id"],
                match=MatchMode(data.get("match", MatchMode.ALL.value)),
                filters=[decode_filter(f) for f in data.get("filters") or []],
            )
        except KeyError as e:
            raise ValueError(f"Missing required subscription field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid subscription data: {e}")


@dataclass(frozen=True)
class FilteringConfig:
    """
    Top-level filtering configuration.

    Loaded from YAML and validated at startup. Immutable after construction.
    """

    subscriptions: Tuple[SubscriptionConfig, ...] = field(default_factory=tuple)
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate filtering configuration."""
        object.__setattr__(self, 'subscriptions', tuple(self.subscriptions))

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(_LOG_LEVELS)}"
            )

        seen = set()
        for subscription in self.subscriptions:
            if subscription.subscription_id in seen:
                raise ValueError(
                    f"Duplicate subscription_id: {subscription.subscription_id}"
                )
            seen.add(subscription.subscription_id)

    def get_subscription(self, subscription_id: str) -> Optional[SubscriptionConfig]:
        """Find subscription by id, None if absent."""
        for subscription in self.subscriptions:
            if subscription.subscription_id == subscription_id:
                return subscription
        return None

    def create_logger(self, component: str = "pipeline") -> StructuredLogger:
        """Structured logger at the configured level."""
        return create_logger(component, level=getattr(logging, self.log_level))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilteringConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Filtering config must be a mapping, got {type(data).__name__}")

        return cls(
            subscriptions=[
                SubscriptionConfig.from_dict(s)
                for s in data.get("subscriptions") or []
            ],
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        logger: Optional[StructuredLogger] = None
    ) -> "FilteringConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: INFO

            subscriptions:
              - subscription_id: "pumps-running"
                match: ALL
                filters:
                  - filterType: attribute-entity-id
                    entityId: ["pump-1", "pump-2"]
                  - filterType: attribute-predicate
                    attributeName: running
                    predicate:
                      predicateType: boolean
                      value: true

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML or its content is invalid
        """
        logger = logger or create_logger("config")
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            config = cls.from_dict(data or {})
        except yaml.YAMLError as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Invalid YAML in filtering config",
                metadata={'path': str(path)},
                exc_info=e,
            )
            raise ValueError(f"Invalid YAML in {path}: {e}")
        except DeserializationError as e:
            logger.error(
                event=LogEvent.DESERIALIZATION_ERROR,
                message="Filter in config could not be decoded",
                metadata={'path': str(path)},
                exc_info=e,
            )
            raise

        logger.info(
            event=LogEvent.SUBSCRIPTIONS_LOADED,
            message=f"Loaded {len(config.subscriptions)} subscriptions",
            metadata={
                'path': str(path),
                'subscriptions': [s.subscription_id for s in config.subscriptions],
            }
        )
        return config
