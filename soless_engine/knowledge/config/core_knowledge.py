"""
core_knowledge.py — Fixed Knowledge Text
=========================================
Static text that opens every knowledge blob, whatever documents are stored.
Edit CORE_KNOWLEDGE to describe the project; it is injected verbatim.
"""

CORE_KNOWLEDGE = """\
# SOLess Project

## Core Concept
SOLess is a project on the Solana blockchain. The assistant answers questions
about the project, its ecosystem and its roadmap.\
"""

BACKGROUND_HEADER = "## Assistant Background"

DOCUMENT_HEADER = "# Document: {filename}"

# Sentinels used when no document text could be included
NO_DOCUMENTS_NOTE = "No documents found. Please add documents to the knowledge base."
NO_READABLE_DOCUMENTS_NOTE = "No readable documents found."
