"""
proto-i18n - Generate translation catalogs from Protocol Buffers definitions.
"""

from .main import main

__all__ = ["main"]
