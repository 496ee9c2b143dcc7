"""Typed views over the GitHub project GraphQL responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

from tap_github_projects.errors import ProjectExportError, ProjectNotFound

# GitHub returns the settings of fields without configuration as the JSON
# document "null", serialized into a string.
SETTINGS_ABSENT = "null"


@dataclass(frozen=True)
class ProjectRef:
    """Identifies a project board by organization login and number."""

    org: str
    project_number: int

    def __str__(self) -> str:
        return f"{self.org}/projects/{self.project_number}"


@dataclass(frozen=True)
class SelectOption:
    id: str
    name_html: str


@dataclass(frozen=True)
class FieldSettings:
    """Parsed ``settings`` document of a project field."""

    options: list[SelectOption] | None = None

    @classmethod
    def parse(cls, raw: str | None) -> FieldSettings | None:
        """Return None for the absence marker, otherwise the parsed settings."""
        if raw is None or raw == SETTINGS_ABSENT:
            return None
        try:
            document = json.loads(raw) if isinstance(raw, str) else raw
        except json.JSONDecodeError as exc:
            raise ProjectExportError(
                "The project contains a field whose settings could not be read.",
                f"Field settings are not valid JSON: {exc} in {raw!r}",
            ) from exc
        if not isinstance(document, dict):
            return None
        options = document.get("options")
        if options is None:
            return cls()
        try:
            return cls(
                options=[
                    SelectOption(id=str(opt["id"]), name_html=opt.get("name_html", ""))
                    for opt in options
                ]
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ProjectExportError(
                "The project contains a field whose settings could not be read.",
                f"Malformed option in field settings {raw!r}: {exc!r}",
            ) from exc


@dataclass(frozen=True)
class FieldSchema:
    """One entry of the board's field configuration."""

    name: str
    data_type: str | None
    settings: str | None

    @classmethod
    def from_dict(cls, node: dict) -> FieldSchema:
        return cls(
            name=node["name"],
            data_type=node.get("dataType"),
            settings=node.get("settings"),
        )


@dataclass(frozen=True)
class ProjectField:
    name: str
    settings: str | None


@dataclass(frozen=True)
class FieldValue:
    """A custom value set on one item for one project field."""

    project_field: ProjectField
    value: Any

    @classmethod
    def from_dict(cls, node: dict) -> FieldValue:
        project_field = node.get("projectField") or {}
        return cls(
            project_field=ProjectField(
                name=project_field.get("name", ""),
                settings=project_field.get("settings"),
            ),
            value=node.get("value"),
        )


def _names(connection: dict | None) -> list[str]:
    if not connection:
        return []
    return [node.get("name") or "" for node in connection.get("nodes") or []]


@dataclass(frozen=True)
class Issue:
    title: str
    number: int
    state: str
    assignees: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DraftIssue:
    title: str
    assignees: list[str] = field(default_factory=list)


Content = Union[Issue, DraftIssue]


def parse_content(node: dict | None) -> Content:
    """Build the content variant of an item from its ``__typename``."""
    if not node:
        raise ProjectExportError(
            "The project contains an item that could not be read.",
            "Project item has no content; it may be redacted or of an "
            "unsupported type.",
        )
    kind = node.get("type")
    if kind == "Issue":
        return Issue(
            title=node.get("title") or "",
            number=node["number"],
            state=node.get("state") or "",
            assignees=_names(node.get("assignees")),
            labels=_names(node.get("labels")),
        )
    if kind == "DraftIssue":
        return DraftIssue(
            title=node.get("title") or "",
            assignees=_names(node.get("assignees")),
        )
    raise ProjectExportError(
        "The project contains an item type that is not supported.",
        f"Unsupported project item content type: {kind!r}",
    )


@dataclass(frozen=True)
class RawItem:
    content: Content
    field_values: list[FieldValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, node: dict) -> RawItem:
        values = (node.get("fieldValues") or {}).get("nodes") or []
        return cls(
            content=parse_content(node.get("content")),
            field_values=[FieldValue.from_dict(value) for value in values],
        )


@dataclass(frozen=True)
class PageInfo:
    end_cursor: str | None
    has_next_page: bool


@dataclass(frozen=True)
class ItemsPage:
    """One page of the items query."""

    project_title: str | None
    total_count: int | None
    items: list[RawItem]
    page_info: PageInfo


@dataclass
class ResultSet:
    """Normalized rows accumulated over every page, in API order."""

    items: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"items": self.items}


def _project_node(body: str, ref: ProjectRef) -> dict:
    """Return the ``projectNext`` node, or raise ProjectNotFound."""
    try:
        envelope = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ProjectExportError(
            f"Something went wrong while querying {ref} :(",
            f"Response body for {ref} is not valid JSON: {exc}",
        ) from exc

    data = envelope.get("data") if isinstance(envelope, dict) else None
    organization = (data or {}).get("organization")
    project = (organization or {}).get("projectNext")
    if not organization or not project:
        errors = envelope.get("errors") if isinstance(envelope, dict) else None
        messages = "; ".join(
            str(error.get("message", error)) for error in errors or []
        )
        raise ProjectNotFound(
            f"Could not find project {ref}. Check the URL and the token's access.",
            "An error occurred while querying for project information"
            f" ({ref}): {messages or 'organization or project missing in response'}",
        )
    return project


def parse_fields_response(body: str, ref: ProjectRef) -> list[FieldSchema]:
    project = _project_node(body, ref)
    nodes = (project.get("fields") or {}).get("nodes") or []
    return [FieldSchema.from_dict(node) for node in nodes]


def parse_items_response(body: str, ref: ProjectRef) -> ItemsPage:
    project = _project_node(body, ref)
    items = project.get("items") or {}
    page_info = items.get("pageInfo") or {}
    return ItemsPage(
        project_title=project.get("title"),
        total_count=items.get("totalCount"),
        items=[RawItem.from_dict(node) for node in items.get("nodes") or []],
        page_info=PageInfo(
            end_cursor=page_info.get("endCursor"),
            has_next_page=bool(page_info.get("hasNextPage")),
        ),
    )
