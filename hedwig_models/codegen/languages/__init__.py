"""
Language-specific code generators.

This module contains generators for the supported target languages.
"""

from .go import GoGenerator, create_go_generator

__all__ = ["GoGenerator", "create_go_generator"]
