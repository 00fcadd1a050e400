"""Exceptions raised while building XMS request payloads."""


class XmsError(Exception):
    """Base exception for all clx_xms errors."""


class SerializationError(XmsError, ValueError):
    """A request object could not be turned into a payload."""


class ValidationError(SerializationError):
    """A required field is missing or a field holds an unrecognized value."""


class EncodingError(SerializationError):
    """A field value could not be encoded to its wire representation."""


class InvalidStateError(XmsError, RuntimeError):
    """Attempted to read the value of an absent or reset field."""
