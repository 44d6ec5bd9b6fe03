"""Enumeration types for SuperHeader."""

from enum import StrEnum


class ActionType(StrEnum):
    """What a header action does when triggered."""

    LINK = "link"
    FLOW = "flow"
    CREATE_ANYWHERE = "create_anywhere"


class ButtonType(StrEnum):
    """Visual style of a header action button."""

    PRIMARY = "primary"
    NORMAL = "normal"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
