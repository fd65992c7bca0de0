"""
Core package initialization.
"""

from myhealth.core.config import settings, get_settings
from myhealth.core.dependencies import get_settings_dependency, get_current_user

__all__ = [
    "settings",
    "get_settings",
    "get_settings_dependency",
    "get_current_user",
]
