"""
knowledge/config/__init__.py
============================
  core_knowledge — fixed preamble, section headers and sentinel notes
"""

from . import core_knowledge
