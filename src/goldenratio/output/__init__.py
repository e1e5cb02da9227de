"""Rendering of CLI output."""
