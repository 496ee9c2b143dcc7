"""Tests for the cursor pagination driver."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from tap_github_projects.errors import ProjectNotFound, QueryFailed
from tap_github_projects.pagination import fetch_all_items
from tap_github_projects.session import QuerySession
from tests.fixtures import NOT_FOUND_BODY, draft_node, issue_node, items_body


class TestFetchAllItems:
    def setup_method(self):
        self.client = Mock()

    def session(self, project_ref):
        return QuerySession(project=project_ref, custom_fields=("Estimate",))

    def test_pages_are_concatenated_in_order(self, project_ref):
        self.client.request_items_page.side_effect = [
            items_body(
                [issue_node(title="one", number=1), issue_node(title="two", number=2)],
                has_next_page=True,
                end_cursor="c1",
            ),
            items_body([draft_node(title="three")], has_next_page=False, end_cursor="c2"),
        ]

        result = fetch_all_items(self.client, self.session(project_ref))

        assert [row["Title"] for row in result.items] == ["one", "two", "three"]
        assert all(list(row)[-1] == "Estimate" for row in result.items)
        calls = self.client.request_items_page.call_args_list
        assert [c.args for c in calls] == [(project_ref, None), (project_ref, "c1")]

    def test_single_page(self, project_ref):
        self.client.request_items_page.return_value = items_body([issue_node()])

        result = fetch_all_items(self.client, self.session(project_ref))

        assert len(result.items) == 1
        self.client.request_items_page.assert_called_once_with(project_ref, None)

    def test_empty_project(self, project_ref):
        self.client.request_items_page.return_value = items_body([])
        assert fetch_all_items(self.client, self.session(project_ref)).items == []

    def test_failure_on_later_page_aborts(self, project_ref):
        self.client.request_items_page.side_effect = [
            items_body([issue_node()], has_next_page=True, end_cursor="c1"),
            QueryFailed("Something went wrong", "502 Server Error"),
        ]
        with pytest.raises(QueryFailed):
            fetch_all_items(self.client, self.session(project_ref))

    def test_missing_organization(self, project_ref):
        self.client.request_items_page.return_value = NOT_FOUND_BODY
        with pytest.raises(ProjectNotFound):
            fetch_all_items(self.client, self.session(project_ref))
