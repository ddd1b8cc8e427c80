"""Normalization resources: abbreviation dictionaries, the expander and language resolution."""

from .expander import (
    DictionaryExpander,
    Expander,
    get_expander,
    is_initialized,
    setup,
    strip_accents,
    teardown,
)
from .language_support import LanguageResolver, resolve_languages

__all__ = [
    'DictionaryExpander',
    'Expander',
    'get_expander',
    'is_initialized',
    'setup',
    'strip_accents',
    'teardown',
    'LanguageResolver',
    'resolve_languages',
]
