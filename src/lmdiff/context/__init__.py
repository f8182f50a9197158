"""Change-set construction and content resolution."""

from lmdiff.context.builder import PathSetBuilder, build_review_context
from lmdiff.context.models import Diagnostic, ReviewContext
from lmdiff.context.resolver import PLACEHOLDER, ContentResolver

__all__ = [
    "PLACEHOLDER",
    "ContentResolver",
    "Diagnostic",
    "PathSetBuilder",
    "ReviewContext",
    "build_review_context",
]
