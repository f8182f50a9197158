"""Prompt and terminal renderers."""
