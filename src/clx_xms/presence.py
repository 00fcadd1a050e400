from enum import StrEnum
from typing import Any, Generic, TypeVar, get_args
from pydantic import GetCoreSchemaHandler, ValidatorFunctionWrapHandler
from pydantic_core import core_schema

from .exceptions import InvalidStateError

T = TypeVar("T")


class PresenceState(StrEnum):
    ABSENT = "absent"
    RESET = "reset"
    VALUE = "value"


class Presence(Generic[T]):
    """Tri-state wrapper for an optional request field.
    
    - ABSENT - the field is left out of the payload entirely
    - RESET - the field is sent as `null`, clearing it on the server
    - VALUE - the field is sent with the wrapped value
    
    Instances are immutable. Use `Presence.absent()`, `Presence.reset()` and `Presence.of(value)` rather than the constructor.
    """
    
    __slots__ = ("_state", "_value")
    
    _state: PresenceState
    _value: T | None
    
    def __init__(self, state: PresenceState, value: T | None = None):
        if state == PresenceState.VALUE and value is None:
            raise ValueError("Presence.of() needs a value, use Presence.reset() to clear a field")
        if state != PresenceState.VALUE and value is not None:
            raise ValueError(f"A {state} presence cannot hold a value")
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_value", value)
        
    def __setattr__(self, name, value):
        raise AttributeError("Presence is immutable")
    
    @classmethod
    def absent(cls) -> "Presence[Any]":
        return ABSENT
    
    @classmethod
    def reset(cls) -> "Presence[Any]":
        return RESET
    
    @classmethod
    def of(cls, value: T) -> "Presence[T]":
        return cls(PresenceState.VALUE, value)
    
    @property
    def state(self) -> PresenceState:
        return self._state
    
    def is_absent(self) -> bool:
        return self._state == PresenceState.ABSENT
    
    def is_reset(self) -> bool:
        return self._state == PresenceState.RESET
    
    def has_value(self) -> bool:
        return self._state == PresenceState.VALUE
    
    def value(self) -> T:
        """Returns the wrapped value, raises `InvalidStateError` if absent or reset."""
        if self._state != PresenceState.VALUE:
            raise InvalidStateError(f"Cannot read the value of a {self._state} field")
        return self._value
    
    def __eq__(self, other):
        if not isinstance(other, Presence):
            return NotImplemented
        return self._state == other._state and self._value == other._value
    
    def __hash__(self):
        return hash((self._state, self._value))
    
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Presence, (self._state, self._value))

    def __repr__(self):
        if self._state == PresenceState.VALUE:
            return f"<Presence value: {self._value!r}>"
        return f"<Presence {self._state}>"
    
    @classmethod
    def _validate(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> "Presence[Any]":
        if isinstance(value, Presence):
            if not value.has_value():
                return value
            value = value.value()
        return cls.of(handler(value))
    
    @staticmethod
    def _serialize(presence: "Presence[Any]") -> Any:
        return presence.value() if presence.has_value() else None
    
    @classmethod
    def __get_pydantic_core_schema__(
        cls, 
        source_type: Any, 
        handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validates bare values and the contents of set presences against `T`.
        
        Absent and reset presences pass through as is. When dumped, a set presence becomes its value and the other states become `None`, so use `exclude_unset=True` to leave absent fields out.
        """
        args = get_args(source_type)
        value_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        
        return core_schema.no_info_wrap_validator_function(
            cls._validate,
            value_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize,
                info_arg=False,
                return_schema=core_schema.nullable_schema(value_schema)
            )
        )


ABSENT: Presence[Any] = Presence(PresenceState.ABSENT)
RESET: Presence[Any] = Presence(PresenceState.RESET)
