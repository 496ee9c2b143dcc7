"""Test suite for tap-github-projects."""
