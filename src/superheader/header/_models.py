"""Header option models.

These mirror the options an editor configures on the header interface.
Option keys may be given in the interface's camelCase spelling
(``actionType``, ``selectedCollection``, ``defaultFields``,
``actionButton``) or in snake_case. Action targets are optional: an action
without the target its type uses is kept and resolves with that target
unset, so one incomplete action does not hide the rest of the header.
"""

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from superheader.enums import ActionType, ButtonType


class _OptionsModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True
    )


class FlowIdentifier(_OptionsModel):
    """The flow triggered by a flow action."""

    collection: str
    key: str


class DefaultField(_OptionsModel):
    """A field prefilled when creating a record from a header action.

    ``value`` is a template and may reference fields of the current record.
    """

    field: str
    value: str = ""


class Action(_OptionsModel):
    """A header action button.

    Attributes:
        label: Button text (template).
        icon: Icon name shown next to the label.
        type: Button style.
        action_type: What the action does.
        url: Link target (template) of link actions.
        flow: Flow triggered by flow actions.
        selected_collection: Collection create-anywhere actions create a
            record in.
        default_fields: Prefilled values for create-anywhere actions.
    """

    label: str
    icon: str | None = None
    type: ButtonType = ButtonType.NORMAL
    action_type: ActionType = Field(default=ActionType.LINK, alias="actionType")
    url: str | None = None
    flow: FlowIdentifier | None = None
    selected_collection: str | None = Field(default=None, alias="selectedCollection")
    default_fields: tuple[DefaultField, ...] = Field(default=(), alias="defaultFields")


class HeaderOptions(_OptionsModel):
    """Configured header options.

    ``title``, ``subtitle``, ``help``, ``action_button`` (the label of the
    dropdown shown when there are several actions), action labels, action
    URLs and default field values are templates.
    """

    title: str | None = None
    subtitle: str | None = None
    help: str | None = None
    action_button: str | None = Field(default=None, alias="actionButton")
    icon: str | None = None
    color: str | None = None
    actions: tuple[Action, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedAction:
    """An action with its templates resolved."""

    label: str
    action_type: ActionType
    type: ButtonType
    icon: str | None = None
    url: str | None = None
    flow: FlowIdentifier | None = None
    selected_collection: str | None = None
    default_fields: dict[str, str] | None = None


@dataclass(frozen=True, slots=True)
class ResolvedHeader:
    """Header options with every template resolved."""

    title: str | None = None
    subtitle: str | None = None
    help: str | None = None
    action_button: str | None = None
    icon: str | None = None
    color: str | None = None
    actions: tuple[ResolvedAction, ...] = ()
