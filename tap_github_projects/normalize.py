"""Flattening of project items into tabular rows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tap_github_projects.errors import OptionLookupFailed, ProjectExportError
from tap_github_projects.models import DraftIssue, FieldSettings, Issue

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tap_github_projects.models import FieldValue, RawItem

logger = logging.getLogger(__name__)

FIXED_COLUMNS = ("Title", "IssueNumber", "State", "Assignees", "Labels")


def resolve_field_value(field_value: FieldValue, strict: bool = True) -> Any:
    """Return the displayed value of one custom field value.

    Fields without settings hold the value directly. Select fields store an
    option id that is looked up in the field's ``options`` table.

    Raises:
        OptionLookupFailed: If ``strict`` and the option id is not in the table.
    """
    project_field = field_value.project_field
    settings = FieldSettings.parse(project_field.settings)
    if settings is None or settings.options is None:
        return "" if field_value.value is None else field_value.value

    for option in settings.options:
        if option.id == field_value.value:
            return option.name_html

    msg = (
        f"Option {field_value.value!r} of field '{project_field.name}' is not "
        f"one of {[option.id for option in settings.options]}"
    )
    if strict:
        raise OptionLookupFailed(
            f"Could not read the value of field '{project_field.name}'.", msg
        )
    logger.warning("%s, leaving the cell empty", msg)
    return ""


def normalize_item(
    item: RawItem,
    custom_fields: Sequence[str],
    strict: bool = True,
) -> dict[str, Any]:
    """Map one raw item to a flat row.

    Keys are the fixed columns followed by ``custom_fields`` in order.
    """
    clashing = [name for name in custom_fields if name in FIXED_COLUMNS]
    if clashing:
        raise ProjectExportError(
            "The project has a field named like a built-in column.",
            f"Custom fields {clashing} would overwrite columns {list(FIXED_COLUMNS)}",
        )
    content = item.content
    if isinstance(content, Issue):
        issue_number: int | str = content.number
        state = content.state
        labels = list(content.labels)
    elif isinstance(content, DraftIssue):
        issue_number = ""
        state = ""
        labels = []
    else:
        raise TypeError(f"Unhandled item content: {type(content).__name__}")

    row: dict[str, Any] = {
        "Title": content.title.replace(",", ""),
        "IssueNumber": issue_number,
        "State": state,
        "Assignees": list(content.assignees),
        "Labels": labels,
    }

    values_by_name: dict[str, FieldValue] = {}
    for field_value in item.field_values:
        values_by_name.setdefault(field_value.project_field.name, field_value)

    for name in custom_fields:
        field_value = values_by_name.get(name)
        if field_value is None:
            row[name] = ""
        else:
            row[name] = resolve_field_value(field_value, strict=strict)
    return row


def normalize_items(
    items: Iterable[RawItem],
    custom_fields: Sequence[str],
    strict: bool = True,
) -> list[dict[str, Any]]:
    return [normalize_item(item, custom_fields, strict=strict) for item in items]
