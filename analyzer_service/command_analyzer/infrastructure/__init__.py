# ============================================================================
# analyzer_service/command_analyzer/infrastructure/__init__.py
# ============================================================================
"""
Infrastructure layer - Static lexicon loading (file I/O)
"""

from .grammar_loader import Lexicon, LexiconLoader, get_lexicon

__all__ = ["Lexicon", "LexiconLoader", "get_lexicon"]
