"""Utility modules for Sangria.

Provides:
- logger: get_logger for namespaced logging
"""

from sangria.utils.logger import get_logger

__all__ = ["get_logger"]
