"""lmdiff: package pending git changes into an LLM review prompt."""

__version__ = "0.1.0"
