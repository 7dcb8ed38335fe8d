import functools
from typing import Any

from pydantic import TypeAdapter


@functools.cache
def type_adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(cls)


def convert_by_field_names(obj: Any, target: type) -> Any:
    """Copies an object into a structurally identical type, matching fields by name."""
    data = type_adapter(type(obj)).dump_python(obj, by_alias=False)
    return type_adapter(target).validate_python(data)
