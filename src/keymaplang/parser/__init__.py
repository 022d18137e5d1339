# src/keymaplang/parser/__init__.py
"""
Parser module for the keymap language.
"""

from .parser import Parser, parse

__all__ = ["Parser", "parse"]
