"""
SOLess AI Engine: document-backed assistant served over the web and Telegram.
"""

__version__ = "1.0.0"
