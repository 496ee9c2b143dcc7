from __future__ import annotations

import json

import pytest

GRAPHQL_URL = "https://api.github.com/graphql"

FIELDS_RESPONSE = {
    "data": {
        "organization": {
            "name": "MeltanoLabs",
            "projectNext": {
                "title": "Roadmap",
                "url": "https://github.com/orgs/MeltanoLabs/projects/3",
                "fields": {
                    "nodes": [
                        {"dataType": "TITLE", "name": "Title", "settings": "null"},
                        {"dataType": "ASSIGNEES", "name": "Assignees", "settings": "null"},
                        {
                            "dataType": "SINGLE_SELECT",
                            "name": "Status",
                            "settings": json.dumps(
                                {
                                    "options": [
                                        {"id": "f75ad846", "name_html": "Todo"},
                                        {"id": "47fc9ee4", "name_html": "Done"},
                                    ]
                                }
                            ),
                        },
                        {"dataType": "NUMBER", "name": "Points", "settings": "null"},
                    ]
                },
            },
        }
    }
}


def items_response(nodes, has_next_page=False, end_cursor=None):
    return {
        "data": {
            "organization": {
                "name": "MeltanoLabs",
                "projectNext": {
                    "title": "Roadmap",
                    "url": "https://github.com/orgs/MeltanoLabs/projects/3",
                    "items": {
                        "totalCount": len(nodes),
                        "nodes": nodes,
                        "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
                    },
                },
            }
        }
    }


ITEM_NODES = [
    {
        "content": {
            "type": "Issue",
            "title": "Add projects stream",
            "number": 42,
            "state": "CLOSED",
            "assignees": {"nodes": [{"name": "Eric Boucher"}]},
            "labels": {"nodes": [{"name": "enhancement"}]},
        },
        "fieldValues": {
            "nodes": [
                {
                    "projectField": {
                        "name": "Status",
                        "settings": FIELDS_RESPONSE["data"]["organization"]["projectNext"][
                            "fields"
                        ]["nodes"][2]["settings"],
                    },
                    "value": "47fc9ee4",
                },
                {"projectField": {"name": "Points", "settings": "null"}, "value": "3"},
            ]
        },
    },
    {
        "content": {
            "type": "DraftIssue",
            "title": "Write docs",
            "assignees": {"nodes": []},
        },
        "fieldValues": {"nodes": []},
    },
]


@pytest.fixture
def project_config():
    return {
        "auth_token": "test-token",
        "project_url": "https://github.com/orgs/MeltanoLabs/projects/3",
    }


@pytest.fixture
def mocked_project(requests_mock):
    requests_mock.post(
        GRAPHQL_URL,
        [
            {"json": FIELDS_RESPONSE},
            {"json": items_response(ITEM_NODES[:1], has_next_page=True, end_cursor="MQ")},
            {"json": items_response(ITEM_NODES[1:])},
        ],
    )
    return requests_mock
