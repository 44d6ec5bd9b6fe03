"""Unit tests for header option models."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from pyfakefs.fake_filesystem import FakeFilesystem

from superheader.enums import ActionType, ButtonType
from superheader.exceptions import HeaderOptionsError
from superheader.header import Action, HeaderOptions, load_header_options


class TestAction:
    def test_defaults_to_normal_link(self) -> None:
        action = Action(label="Open", url="https://example.com")

        assert action.action_type is ActionType.LINK
        assert action.type is ButtonType.NORMAL
        assert action.default_fields == ()

    def test_accepts_camel_case_keys(self) -> None:
        action = Action.model_validate(
            {
                "label": "New task",
                "actionType": "create_anywhere",
                "selectedCollection": "tasks",
                "defaultFields": [{"field": "article", "value": "{{ id }}"}],
            }
        )

        assert action.action_type is ActionType.CREATE_ANYWHERE
        assert action.selected_collection == "tasks"
        assert action.default_fields[0].field == "article"
        assert action.default_fields[0].value == "{{ id }}"

    def test_accepts_snake_case_keys(self) -> None:
        action = Action.model_validate(
            {
                "label": "Publish",
                "action_type": "flow",
                "flow": {"collection": "directus_flows", "key": "f-1"},
            }
        )

        assert action.flow is not None
        assert action.flow.key == "f-1"

    @pytest.mark.parametrize(
        "data",
        [
            {"label": "Go"},
            {"label": "Run", "actionType": "flow"},
            {"label": "New", "actionType": "create_anywhere"},
        ],
    )
    def test_target_is_optional(self, data: dict[str, object]) -> None:
        action = Action.model_validate(data)

        assert action.url is None
        assert action.flow is None
        assert action.selected_collection is None

    def test_rejects_unknown_button_type(self) -> None:
        with pytest.raises(ValidationError):
            _ = Action.model_validate({"label": "Go", "url": "/", "type": "loud"})


class TestHeaderOptions:
    def test_all_optional(self) -> None:
        options = HeaderOptions()

        assert options.title is None
        assert options.action_button is None
        assert options.actions == ()

    def test_action_button_alias(self) -> None:
        options = HeaderOptions.model_validate({"actionButton": "More ({{ id }})"})

        assert options.action_button == "More ({{ id }})"

    def test_is_frozen(self) -> None:
        options = HeaderOptions(title="Hello")

        with pytest.raises(ValidationError):
            options.title = "Changed"  # pyright: ignore[reportAttributeAccessIssue]


class TestLoadHeaderOptions:
    def test_loads_json(self, fs: FakeFilesystem) -> None:
        path = Path("/options/header.json")
        fs.create_file(
            path,
            contents='{"title": "{{ title }}", "color": "#6644FF", '
            '"actions": [{"label": "View", "url": "/a/{{ id }}"}]}',
        )

        options = load_header_options(path)

        assert options.title == "{{ title }}"
        assert options.color == "#6644FF"
        assert options.actions[0].url == "/a/{{ id }}"

    def test_loads_toml(self, fs: FakeFilesystem) -> None:
        content = """
title = "{{ title }}"
subtitle = "by {{ author.name }}"

[[actions]]
label = "Publish"
actionType = "flow"
type = "primary"
flow = { collection = "directus_flows", key = "f-1" }
"""
        path = Path("/options/header.toml")
        fs.create_file(path, contents=content)

        options = load_header_options(path)

        assert options.subtitle == "by {{ author.name }}"
        assert options.actions[0].type is ButtonType.PRIMARY

    def test_missing_file(self, fs: FakeFilesystem) -> None:
        with pytest.raises(HeaderOptionsError, match="Cannot read"):
            _ = load_header_options(Path("/options/missing.json"))

    def test_invalid_json(self, fs: FakeFilesystem) -> None:
        path = Path("/options/header.json")
        fs.create_file(path, contents="{not json")

        with pytest.raises(HeaderOptionsError, match="Cannot parse") as exc_info:
            _ = load_header_options(path)

        assert exc_info.value.path == path

    def test_invalid_options(self, fs: FakeFilesystem) -> None:
        path = Path("/options/header.json")
        fs.create_file(
            path, contents='{"actions": [{"label": "Go", "actionType": "teleport"}]}'
        )

        with pytest.raises(HeaderOptionsError, match="Invalid header options"):
            _ = load_header_options(path)
