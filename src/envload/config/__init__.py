"""
Loader configuration with typed Pydantic models.
"""

from envload.config.settings import LoaderConfig

__all__ = [
    "LoaderConfig",
]
