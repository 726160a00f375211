"""
Shared utilities for QUILL.

Common functionality used across contexts:
- Logger setup
- LLM provider abstraction
- PDF helpers
"""

from quill.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
