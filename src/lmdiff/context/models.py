"""Review context data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal

DiagnosticKind = Literal["classify", "walk", "content"]


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem with one path; the run continues without it."""

    path: str
    message: str
    kind: DiagnosticKind = "content"


@dataclass
class ReviewContext:
    """Everything the prompt formatter needs besides the diff text."""

    ref: str
    change_set: List[str] = field(default_factory=list)
    contents: Dict[str, str] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.contents)

    @property
    def placeholder_paths(self) -> List[str]:
        return [d.path for d in self.diagnostics if d.kind == "content"]
