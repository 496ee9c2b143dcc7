"""Tap and exporter for GitHub project boards."""
