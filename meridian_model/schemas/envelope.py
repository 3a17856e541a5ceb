"""
Event Envelope
==============

Bounded Context: Out-of-band Event Metadata

An AttributeEvent never carries its Source in its own body or equality.
Producers wrap the event in an EventEnvelope whose headers travel beside
the serialized event, e.g. as MQTT v5 user properties on the PUBLISH packet.

Design:
- Headers are plain str -> str pairs (transport agnostic)
- HEADER_SOURCE names the provenance header
- to_mqtt_properties()/from_mqtt_properties() map headers onto paho-mqtt
  user properties; no broker connection is made here

Example:
    >>> envelope = EventEnvelope.wrap(event, Source.SENSOR)
    >>> props = envelope.to_mqtt_properties()
    >>> EventEnvelope.from_mqtt_properties(event, props).source
    <Source.SENSOR: 'SENSOR'>
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from paho.mqtt.packettypes import PacketTypes
from paho.mqtt.properties import Properties

from .event import AttributeEvent, Source


HEADER_SOURCE = "meridian_model.AttributeEvent.SOURCE"


@dataclass(frozen=True)
class EventEnvelope:
    """
    An AttributeEvent plus its transport metadata.

    Attributes:
        event: The wrapped event
        headers: Read-only header mapping (e.g. HEADER_SOURCE -> "SENSOR")
    """
    event: AttributeEvent
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate and freeze headers."""
        if not isinstance(self.event, AttributeEvent):
            raise TypeError(
                f"event must be AttributeEvent, got {type(self.event).__name__}"
            )
        for name, value in self.headers.items():
            if not isinstance(name, str) or not isinstance(value, str):
                raise TypeError(f"Header {name!r} must map str to str")
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    @classmethod
    def wrap(cls, event: AttributeEvent, source: Source) -> 'EventEnvelope':
        """Wrap an event with its provenance header."""
        return cls(event=event, headers={HEADER_SOURCE: Source(source).value})

    @property
    def source(self) -> Optional[Source]:
        """
        Provenance of the event.

        Returns:
            Source, or None when no source header is attached

        Raises:
            ValueError: If the header holds an unknown source value
        """
        raw = self.headers.get(HEADER_SOURCE)
        if raw is None:
            return None
        return Source(raw)

    def with_header(self, name: str, value: str) -> 'EventEnvelope':
        """Return a copy with one header added or replaced."""
        headers = dict(self.headers)
        headers[name] = value
        return EventEnvelope(event=self.event, headers=headers)

    def to_mqtt_properties(self) -> Properties:
        """Encode headers as MQTT v5 PUBLISH user properties."""
        properties = Properties(PacketTypes.PUBLISH)
        if self.headers:
            properties.UserProperty = list(self.headers.items())
        return properties

    @classmethod
    def from_mqtt_properties(
        cls,
        event: AttributeEvent,
        properties: Optional[Properties]
    ) -> 'EventEnvelope':
        """Rebuild an envelope from a decoded event and received properties."""
        user_properties = getattr(properties, 'UserProperty', None) or []
        return cls(event=event, headers=dict(user_properties))
