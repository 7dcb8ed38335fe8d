from .errors import (
    ConversionError,
    DeserializationError,
    NotRegisteredError,
    SchemeError,
    SchemeFrozenError,
    SerializationError,
)
from .schema import INTERNAL_VERSION, GroupVersion, GroupVersionKind
from .scheme import Scheme

__all__ = [
    "ConversionError",
    "DeserializationError",
    "GroupVersion",
    "GroupVersionKind",
    "INTERNAL_VERSION",
    "NotRegisteredError",
    "Scheme",
    "SchemeError",
    "SchemeFrozenError",
    "SerializationError",
]
