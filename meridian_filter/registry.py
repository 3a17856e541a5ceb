"""
TypeRegistry - Explicit discriminator registration pattern

Bounded Context: Wire-format type dispatch
Responsibilities:
  - Register decoders under a discriminator tag
  - Decode wire payloads by table lookup on that tag
  - Provide introspection (available_types, get_help)

Problem: Reflective subtype scanning hides which types can be decoded
Solution: One explicit table per polymorphic family; unknown tags fail

Threading: Thread-safe (uses lock for write operations)
Pattern: Registry with explicit registration
"""

import threading
from typing import Any, Callable, Dict, Generic, Mapping, Set, TypeVar


T = TypeVar('T')


class DeserializationError(ValueError):
    """Raised when a wire payload cannot be decoded."""
    pass


class UnknownTypeError(DeserializationError):
    """Raised when a payload carries an unregistered discriminator."""
    pass


class TypeRegistry(Generic[T]):
    """
    Table from discriminator string to decoder.

    Key Features:
      - Fail-fast: Unknown discriminators rejected, never defaulted
      - Introspection: Can query registered types at runtime
      - Self-Documenting: Each type has a description

    Thread Safety:
      - Uses lock for write operations (register)
      - Read operations are lock-free (dict reads)

    Example:
        registry = TypeRegistry("predicateType")
        registry.register("boolean", BooleanPredicate.from_dict, "Boolean equality")

        predicate = registry.decode({"predicateType": "boolean", "value": True})
    """

    def __init__(self, discriminator: str):
        self.discriminator = discriminator
        self._decoders: Dict[str, Callable[[Mapping[str, Any]], T]] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(
        self,
        type_name: str,
        decoder: Callable[[Mapping[str, Any]], T],
        description: str = ""
    ) -> None:
        """
        Register a decoder for a discriminator value.

        Args:
            type_name: Discriminator literal (e.g. "string", "radial")
            decoder: Callable building an instance from the wire dict
            description: Human-readable description for help text

        Raises:
            ValueError: If type_name already registered (double registration)
        """
        if not type_name:
            raise ValueError(f"{self.discriminator} cannot be empty")

        with self._lock:
            if type_name in self._decoders:
                raise ValueError(
                    f"{self.discriminator} '{type_name}' already registered"
                )

            self._decoders[type_name] = decoder
            self._descriptions[type_name] = description

    def decode(self, data: Mapping[str, Any]) -> T:
        """
        Decode a wire payload.

        Args:
            data: Mapping carrying the discriminator field

        Returns:
            Decoded instance

        Raises:
            UnknownTypeError: If the discriminator is not registered
            DeserializationError: If the payload is malformed
        """
        if not isinstance(data, Mapping):
            raise DeserializationError(
                f"Expected object with '{self.discriminator}', "
                f"got {type(data).__name__}"
            )

        type_name = data.get(self.discriminator)
        if type_name is None:
            raise DeserializationError(
                f"Missing '{self.discriminator}' discriminator"
            )

        decoder = self._decoders.get(type_name) if isinstance(type_name, str) else None
        if decoder is None:
            raise UnknownTypeError(
                f"Unknown {self.discriminator} '{type_name}'. "
                f"Available: {', '.join(sorted(self.available_types))}"
            )

        try:
            return decoder(data)
        except DeserializationError:
            raise
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            raise DeserializationError(
                f"Invalid {self.discriminator} '{type_name}' payload: {e}"
            ) from e

    def is_available(self, type_name: str) -> bool:
        return type_name in self._decoders

    @property
    def available_types(self) -> Set[str]:
        """Snapshot of registered discriminator values."""
        return set(self._decoders.keys())

    def get_help(self) -> Dict[str, str]:
        """Snapshot of discriminator values with descriptions."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._decoders)
