"""Reusable schema objects for tap-github-projects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from singer_sdk import typing as th  # JSON Schema typing helpers

if TYPE_CHECKING:
    from collections.abc import Sequence

# Draft issues have no number, they carry an empty string instead.
issue_number_type = th.CustomType({"type": ["integer", "string"]})

# Values of fields without settings are passed through as the API returns them.
custom_value_type = th.CustomType({"type": ["string", "number", "null"]})


def project_item_schema(custom_fields: Sequence[str]) -> dict:
    """JSON schema of a normalized project row."""
    return th.PropertiesList(
        th.Property("Title", th.StringType, required=True),
        th.Property("IssueNumber", issue_number_type),
        th.Property("State", th.StringType),
        th.Property("Assignees", th.ArrayType(th.StringType)),
        th.Property("Labels", th.ArrayType(th.StringType)),
        *(th.Property(name, custom_value_type) for name in custom_fields),
    ).to_dict()
