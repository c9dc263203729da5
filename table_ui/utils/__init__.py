"""Utility helpers for the table UI."""
