# Backend package
"""
Uniform Grader - grades school uniform photos from pixel statistics
"""

from .config import settings

__all__ = [
    "settings",
]
