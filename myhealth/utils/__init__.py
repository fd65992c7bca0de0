"""
Utils package initialization.
"""

from myhealth.utils.file_utils import (
    DEFAULT_REPORT_FILENAME,
    get_file_extension,
    is_allowed_file,
    guess_mime_type,
    format_file_size,
)

__all__ = [
    "DEFAULT_REPORT_FILENAME",
    "get_file_extension",
    "is_allowed_file",
    "guess_mime_type",
    "format_file_size",
]
