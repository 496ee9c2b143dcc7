"""Utility helpers for tap-github-projects."""
