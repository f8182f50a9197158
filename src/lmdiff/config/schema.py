"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field

from lmdiff.context.resolver import PLACEHOLDER
from lmdiff.files.walker import DEFAULT_METADATA_DIR


@dataclass
class ReviewConfig:
    branch: str = "main"  # reference revision the working tree is compared with
    include_untracked: bool = True
    metadata_dir: str = DEFAULT_METADATA_DIR  # pruned from directory walks


@dataclass
class OutputConfig:
    copy: bool = False
    placeholder: str = PLACEHOLDER
    description: str = ""  # empty = built-in review instruction


@dataclass
class LmdiffConfig:
    version: str = "1.0"
    review: ReviewConfig = field(default_factory=ReviewConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
