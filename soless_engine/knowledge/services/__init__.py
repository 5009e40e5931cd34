"""
Knowledge Services Package

  KnowledgeAssembler        — store → knowledge blob, always fresh
  CachedKnowledgeAssembler  — same output, memoized by content fingerprint
"""

from .knowledge_assembler import (
    KnowledgeAssembler,
    CachedKnowledgeAssembler,
    build_knowledge,
    fingerprint,
)

__all__ = [
    "KnowledgeAssembler",
    "CachedKnowledgeAssembler",
    "build_knowledge",
    "fingerprint",
]
