"""Starter .lmdiff.toml template."""

CONFIG_FILENAME = ".lmdiff.toml"

DEFAULT_TOML = """\
# lmdiff configuration
version = "1.0"

[review]
branch = "main"             # revision to compare the working tree with
include_untracked = true    # also include files git does not track yet
metadata_dir = ".git"       # directory name skipped when expanding directories

[output]
copy = false                # copy the prompt to the clipboard
placeholder = "Error retrieving file content."
# description = "Review these changes for correctness and style."
"""
