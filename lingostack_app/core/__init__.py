"""Core helpers: module registration, logging and error handling."""

from .error_handlers import (
    CategoryStorageError,
    LingoStackError,
    NotFoundError,
    ValidationError,
)
from .module_registry import (
    DEFAULT_MODULES,
    ModuleDefinition,
    register_default_modules,
    register_modules,
)

__all__ = [
    "CategoryStorageError",
    "DEFAULT_MODULES",
    "LingoStackError",
    "ModuleDefinition",
    "NotFoundError",
    "ValidationError",
    "register_default_modules",
    "register_modules",
]
