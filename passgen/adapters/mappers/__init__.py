"""
Mappers package for passgen.
Contains response mappers that convert between domain models and API responses.
"""

from .password_mapper import PasswordMapper

__all__ = [
    "PasswordMapper"
]
