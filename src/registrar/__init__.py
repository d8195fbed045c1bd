"""
Registrar
GraphQL API for courses, students and grades
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
