"""
Target languages.

This module contains the identifier and type naming rules of each supported
language.
"""

from .go import GoLanguage

__all__ = ["GoLanguage"]
