"""Context-module table, library and prompt building."""

from .library import ContextLibrary, ContextModule
from .modules import CONTEXT_MODULES, CORE_PRINCIPLES, context_modules_for, parse_tier
from .prompts import ContextPromptBuilder

__all__ = [
    "ContextLibrary",
    "ContextModule",
    "CONTEXT_MODULES",
    "CORE_PRINCIPLES",
    "context_modules_for",
    "parse_tier",
    "ContextPromptBuilder",
]
