"""Placeholder extraction for header templates.

Placeholders use the ``{{ field.path }}`` syntax. Matching is
lenient: anything between the delimiters that is not a closing brace is
taken as the field path, and there is no escape syntax. Unbalanced
delimiters are left untouched.
"""

import re
from collections.abc import Iterable

PLACEHOLDER_OPEN = "{{"

# {{ <anything but a closing brace> }}
PLACEHOLDER_PATTERN = re.compile(r"{{\s*([^}]+)\s*}}")

FIELD_PATH_SEPARATOR = "."


def has_placeholders(templates: Iterable[str]) -> bool:
    """Check whether any template contains an opening placeholder delimiter."""
    return any(PLACEHOLDER_OPEN in template for template in templates)


def field_path_of(match: re.Match[str]) -> str:
    """Return the trimmed field path captured by a placeholder match."""
    return match.group(1).strip()


def extract_field_paths(template: str) -> list[str]:
    """Extract the field paths referenced by a single template.

    Paths are returned in order of appearance, including repeats.

    Args:
        template: The template string.

    Returns:
        List of trimmed field paths.

    Example:
        >>> extract_field_paths("{{ title }} by {{ author.name }}")
        ['title', 'author.name']
    """
    return [field_path_of(match) for match in PLACEHOLDER_PATTERN.finditer(template)]


def collect_field_paths(templates: Iterable[str]) -> tuple[str, ...]:
    """Collect the distinct field paths referenced across templates.

    Paths are trimmed, then compared exactly. Directus field names are
    case-sensitive, so ``{{ Title }}`` and ``{{ title }}`` are two fields.

    Args:
        templates: Templates to scan.

    Returns:
        Tuple of unique, non-empty field paths in order of first appearance.
    """
    seen: dict[str, None] = {}
    for template in templates:
        for path in extract_field_paths(template):
            if path:
                seen.setdefault(path, None)
    return tuple(seen)


def split_field_path(path: str) -> list[str]:
    """Split a field path into its segments."""
    return path.split(FIELD_PATH_SEPARATOR)
