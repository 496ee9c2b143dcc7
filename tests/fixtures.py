"""Builders for GitHub project GraphQL responses used across the tests."""

from __future__ import annotations

import json

GRAPHQL_URL = "https://api.github.com/graphql"
PROJECT_URL = "https://github.com/orgs/octo-org/projects/5"

PRIORITY_SETTINGS = json.dumps(
    {
        "options": [
            {"id": "o1", "name": "High", "name_html": "High"},
            {"id": "o2", "name": "Low", "name_html": "Low"},
        ]
    }
)


def issue_node(
    title="Fix bug",
    number=1,
    state="OPEN",
    assignees=("Mona",),
    labels=("bug",),
    field_values=(),
):
    return {
        "content": {
            "type": "Issue",
            "title": title,
            "number": number,
            "state": state,
            "assignees": {"nodes": [{"name": name} for name in assignees]},
            "labels": {"nodes": [{"name": name} for name in labels]},
        },
        "fieldValues": {"nodes": list(field_values)},
    }


def draft_node(title="Draft idea", assignees=(), field_values=()):
    return {
        "content": {
            "type": "DraftIssue",
            "title": title,
            "assignees": {"nodes": [{"name": name} for name in assignees]},
        },
        "fieldValues": {"nodes": list(field_values)},
    }


def field_value(name, value, settings="null"):
    return {"projectField": {"name": name, "settings": settings}, "value": value}


def items_body(nodes, has_next_page=False, end_cursor=None):
    return json.dumps(
        {
            "data": {
                "organization": {
                    "name": "Octo Org",
                    "projectNext": {
                        "title": "Roadmap",
                        "url": "https://github.com/orgs/octo-org/projects/5",
                        "items": {
                            "totalCount": len(nodes),
                            "nodes": list(nodes),
                            "pageInfo": {
                                "endCursor": end_cursor,
                                "hasNextPage": has_next_page,
                            },
                        },
                    },
                }
            }
        }
    )


def fields_body(fields):
    return json.dumps(
        {
            "data": {
                "organization": {
                    "name": "Octo Org",
                    "projectNext": {
                        "title": "Roadmap",
                        "url": "https://github.com/orgs/octo-org/projects/5",
                        "fields": {
                            "nodes": [
                                {"dataType": data_type, "name": name, "settings": settings}
                                for name, data_type, settings in fields
                            ]
                        },
                    },
                }
            }
        }
    )


DEFAULT_FIELDS = [
    ("Title", "TITLE", "null"),
    ("Assignees", "ASSIGNEES", "null"),
    ("Priority", "SINGLE_SELECT", PRIORITY_SETTINGS),
    ("Labels", "LABELS", "null"),
    ("Estimate", "NUMBER", "null"),
    ("Milestone", "MILESTONE", "null"),
]

NOT_FOUND_BODY = json.dumps(
    {
        "data": {"organization": None},
        "errors": [
            {
                "type": "NOT_FOUND",
                "message": "Could not resolve to an Organization with the login of 'nope'.",
            }
        ],
    }
)
