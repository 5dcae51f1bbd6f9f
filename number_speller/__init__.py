"""
Number Speller — English number names to numbers and back, typo-tolerant.

Architecture: Lexicon → (Formatter | TokenMatcher → Parser) → Converter
Philosophy:  Fix a single slipped keystroke. Refuse anything worse, and say why.
"""

__version__ = "1.0.0"
