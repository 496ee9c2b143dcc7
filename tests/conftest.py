from __future__ import annotations

import pytest

from tap_github_projects.client import GitHubProjectsClient
from tap_github_projects.models import ProjectRef
from tap_github_projects.state import LastProjectStore


@pytest.fixture
def project_ref():
    return ProjectRef(org="octo-org", project_number=5)


@pytest.fixture
def client():
    return GitHubProjectsClient("test-token", timeout=5)


@pytest.fixture
def store(tmp_path):
    return LastProjectStore(tmp_path / "state.env")
