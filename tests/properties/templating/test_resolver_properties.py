from functools import partial

import anyio
from hypothesis import given, settings, strategies as st

from superheader.fetch import FakeRecordFetcher
from superheader.templating import ResolutionContext, resolve_templates
from superheader.utils import create_logger

field_name = st.from_regex(r"[a-z_][a-z0-9_]{0,8}", fullmatch=True)
plain_text = st.text(alphabet=st.characters(exclude_characters="{}"), max_size=30)
plain_value = st.text(
    alphabet=st.characters(categories=["L", "Nd", "Zs"]), max_size=12
)

LOGGER = create_logger(level="error")
CONTEXT = ResolutionContext("articles", "1")


def _resolve(
    templates: str | list[str],
    fetcher: FakeRecordFetcher,
    context: ResolutionContext = CONTEXT,
) -> str | list[str]:
    return anyio.run(
        partial(resolve_templates, templates, context, fetcher, logger=LOGGER)
    )


def _template(names: list[str], separators: list[str]) -> str:
    return "".join(
        f"{sep}{{{{ {name} }}}}" for name, sep in zip(names, separators, strict=False)
    )


@settings(deadline=None)
@given(templates=st.lists(plain_text, max_size=5))
def test_templates_without_placeholders_are_unchanged(templates: list[str]) -> None:
    fetcher = FakeRecordFetcher()

    assert _resolve(templates, fetcher) == templates
    assert fetcher.calls == []


@settings(deadline=None)
@given(template=plain_text)
def test_string_input_returns_string(template: str) -> None:
    fetcher = FakeRecordFetcher()

    assert _resolve(template, fetcher) == template


@settings(deadline=None)
@given(names=st.lists(st.lists(field_name, max_size=4), max_size=5))
def test_output_length_matches_input(names: list[list[str]]) -> None:
    templates = [" ".join(f"{{{{{name}}}}}" for name in group) for group in names]
    fetcher = FakeRecordFetcher()
    fetcher.add("articles", "1", {})

    result = _resolve(templates, fetcher)

    assert isinstance(result, list)
    assert len(result) == len(templates)


@settings(deadline=None)
@given(
    names=st.lists(field_name, min_size=1, max_size=8),
    separators=st.lists(plain_text, min_size=8, max_size=8),
)
def test_single_fetch_with_unique_paths_in_order(
    names: list[str], separators: list[str]
) -> None:
    fetcher = FakeRecordFetcher()
    fetcher.add("articles", "1", {})
    templates = [_template(names, separators), _template(names[::-1], separators)]

    _ = _resolve(templates, fetcher)

    assert len(fetcher.calls) == 1
    assert fetcher.calls[0].fields == ("*", *dict.fromkeys(names))


@settings(deadline=None)
@given(
    record=st.dictionaries(field_name, plain_value, max_size=6),
    names=st.lists(field_name, min_size=1, max_size=6),
    separators=st.lists(plain_text, min_size=6, max_size=6),
)
def test_resolution_is_idempotent(
    record: dict[str, str], names: list[str], separators: list[str]
) -> None:
    fetcher = FakeRecordFetcher()
    fetcher.add("articles", "1", record)
    template = _template(names, separators)

    once = _resolve(template, fetcher)
    twice = _resolve(once, fetcher)

    assert once == twice
    expected = "".join(
        f"{sep}{record.get(name, '')}"
        for name, sep in zip(names, separators, strict=False)
    )
    assert once == expected


@settings(deadline=None)
@given(values=st.dictionaries(field_name, plain_value, max_size=6))
def test_missing_record_id_never_fetches(values: dict[str, str]) -> None:
    fetcher = FakeRecordFetcher()
    context = ResolutionContext("articles", current_values=values)
    template = " ".join(f"{{{{ {name} }}}}" for name in values)

    result = _resolve(template, fetcher, context)

    assert result == " ".join(values.values())
    assert fetcher.calls == []
