"""Field path lookup and value coercion."""

from collections.abc import Mapping, Sequence

from ._placeholders import split_field_path

DEFAULT_PRIMARY_KEY_FIELD = "id"

_MISSING = object()


def _step(value: object, segment: str) -> object:
    if isinstance(value, Mapping):
        return value.get(segment, _MISSING)  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    # To-many relations come back as lists; allow "items.0.name"
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not (segment.isascii() and segment.isdecimal()):
            return _MISSING
        index = int(segment)
        if index >= len(value):
            return _MISSING
        return value[index]
    return _MISSING


def walk_field_path(record: Mapping[str, object], path: str) -> object | None:
    """Walk a dot-separated field path through a record.

    Args:
        record: The record to read from.
        path: Field path such as ``"author.name"``.

    Returns:
        The value at the path, or None if any segment is missing or an
        intermediate value cannot be traversed.
    """
    value: object = record
    for segment in split_field_path(path):
        value = _step(value, segment)
        if value is _MISSING or value is None:
            return None
    return value


def coerce_value(
    value: object,
    *,
    primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
) -> str:
    """Convert a resolved field value to the text substituted into a template.

    Rules:
        - None becomes an empty string.
        - A mapping (a related record) becomes its primary key, or an empty
          string if the key is absent.
        - A list (a to-many relation) becomes an empty string.
        - Booleans use their JSON spelling.
        - Everything else uses ``str()``.

    Args:
        value: The resolved value.
        primary_key_field: Name of the primary key on related records.

    Returns:
        The substitution text.
    """
    if value is None:
        return ""
    if isinstance(value, Mapping):
        key: object = value.get(primary_key_field)  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        if key is None:
            return ""
        return coerce_value(key, primary_key_field=primary_key_field)
    if isinstance(value, (list, tuple)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
