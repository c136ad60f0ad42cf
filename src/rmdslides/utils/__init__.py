"""Utility modules for rmdslides.

Provides:
- text: title_from_name, strip_extension for file-name handling
- logger: get_logger for logging
"""

from rmdslides.utils.logger import get_logger
from rmdslides.utils.text import strip_extension, title_from_name

__all__ = [
    "get_logger",
    "strip_extension",
    "title_from_name",
]
