"""
Translations Module
"""
from .translations import TRANSLATIONS, text_direction, toggle_locale, translate

__all__ = [
    "TRANSLATIONS",
    "text_direction",
    "toggle_locale",
    "translate",
]
