"""
File handling utilities.
"""

import mimetypes
from pathlib import Path
from typing import Set

DEFAULT_REPORT_FILENAME = "report.pdf"


def get_file_extension(filename: str) -> str:
    """
    Get file extension in lowercase.

    Args:
        filename: Name of the file

    Returns:
        File extension (e.g., '.pdf', '.jpg')
    """
    return Path(filename).suffix.lower()


def is_allowed_file(filename: str, allowed_extensions: Set[str]) -> bool:
    """
    Check if file extension is allowed.

    Args:
        filename: Name of the file
        allowed_extensions: Set of allowed extensions

    Returns:
        True if file type is allowed, False otherwise
    """
    return get_file_extension(filename) in allowed_extensions


def guess_mime_type(filename: str) -> str:
    """Best-effort MIME type for a report, used when sending it to the model."""
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or "application/octet-stream"


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., '2.45 MB')
    """
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} TB"
