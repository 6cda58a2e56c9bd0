"""
Core Services

This module contains core utility helpers.
"""

from .tool import parse_deadline, cell_to_text
