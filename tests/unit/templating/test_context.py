"""Unit tests for the resolution context and synchronous substitution."""

from types import MappingProxyType

import pytest

from superheader.templating import ResolutionContext, substitute_placeholders


class TestResolutionContext:
    def test_from_values_uses_primary_key(self) -> None:
        context = ResolutionContext.from_values("articles", {"id": 12})

        assert context.record_id == "12"

    @pytest.mark.parametrize("values", [{}, {"id": None}, {"id": ""}])
    def test_from_values_without_key(self, values: dict[str, object]) -> None:
        assert ResolutionContext.from_values("articles", values).record_id is None

    def test_from_values_custom_key(self) -> None:
        context = ResolutionContext.from_values(
            "articles", {"id": 1, "uuid": "abc"}, primary_key_field="uuid"
        )

        assert context.record_id == "abc"

    def test_default_values_are_read_only(self) -> None:
        context = ResolutionContext(collection="articles")

        assert isinstance(context.current_values, MappingProxyType)
        assert dict(context.current_values) == {}


class TestSubstitutePlaceholders:
    def test_inserted_text_is_not_rescanned(self) -> None:
        record = {"a": "{{ b }}", "b": "nope"}

        assert substitute_placeholders("{{ a }}", record) == "{{ b }}"

    def test_preserves_surrounding_text(self) -> None:
        record = {"n": 3}

        assert substitute_placeholders("  {{ n }} items  ", record) == "  3 items  "
