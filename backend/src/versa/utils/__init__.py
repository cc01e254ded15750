"""Shared helpers for the Lambda handlers."""
