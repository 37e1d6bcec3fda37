"""View model for the "use in filter" checkbox."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_ID = "ssanzdev_use_in_filter"
FIELD_LABEL = "Use attribute in filter"
FIELD_DESCRIPTION = "Check if you want to display this product attribute in the store's filter."


@dataclass(frozen=True, slots=True)
class CheckboxField:
    """Everything a renderer needs to draw the checkbox.

    Attributes:
        id: DOM id.
        name: Form field name the value is submitted under.
        label: Field label.
        description: Help text below the field.
        checked: Current state.
        value: Submitted value when checked.
    """

    id: str
    name: str
    label: str = FIELD_LABEL
    description: str = FIELD_DESCRIPTION
    checked: bool = False
    value: str = "1"
