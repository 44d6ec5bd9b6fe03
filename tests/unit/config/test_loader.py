# pyright: reportAny=false
import pytest

from superheader.config._loader import (
    deep_merge,
    parse_env_value,
    parse_env_vars,
    set_nested_key,
)


class TestDeepMerge:
    def test_merges_nested_dicts(self) -> None:
        base = {"directus": {"url": "a", "timeout": 1.0}}
        override = {"directus": {"url": "b"}}

        assert deep_merge(base, override) == {"directus": {"url": "b", "timeout": 1.0}}

    def test_does_not_modify_inputs(self) -> None:
        base = {"logging": {"level": "info"}}
        override = {"logging": {"level": "debug"}}

        _ = deep_merge(base, override)

        assert base == {"logging": {"level": "info"}}
        assert override == {"logging": {"level": "debug"}}

    def test_replaces_lists(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


class TestParseEnvValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("FALSE", False),
            ("3", 3),
            ("2.5", 2.5),
            ('["a", "b"]', ["a", "b"]),
            ("https://cms.example.com", "https://cms.example.com"),
            ("[not json", "[not json"),
        ],
    )
    def test_infers_type(self, raw: str, expected: object) -> None:
        assert parse_env_value(raw) == expected


class TestSetNestedKey:
    def test_creates_intermediate_dicts(self) -> None:
        d: dict[str, object] = {}

        set_nested_key(d, "directus.url", "x")

        assert d == {"directus": {"url": "x"}}


class TestParseEnvVars:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHTEST_DIRECTUS__URL", "https://cms.example.com")
        monkeypatch.setenv("SHTEST_DIRECTUS__RETRIES", "5")
        monkeypatch.setenv("SHTEST_", "ignored")

        assert parse_env_vars("SHTEST_") == {
            "directus": {"url": "https://cms.example.com", "retries": 5}
        }
