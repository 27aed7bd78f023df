"""Internationalization System"""

import json
from pathlib import Path
from typing import Any

SUPPORTED_LANGUAGES = {
    "en": "English",
    "pt": "Português",
}

DEFAULT_LANGUAGE = "en"

# Cache for loaded translations
_translations: dict[str, dict[str, Any]] = {}


def _get_locales_path() -> Path:
    """Get path to locales directory"""
    paths = [
        Path(__file__).parent / "locales",  # Installed package data
        Path("locales"),  # Current directory
    ]

    for path in paths:
        if path.exists():
            return path

    return paths[0]


def _load_translations(lang: str) -> dict[str, Any]:
    """Load translations for a language"""
    if lang in _translations:
        return _translations[lang]

    file_path = _get_locales_path() / f"{lang}.json"

    if not file_path.exists():
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        return {}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}

    if not isinstance(data, dict):
        return {}
    _translations[lang] = data
    return data


def _lookup(translations: dict[str, Any], key: str) -> Any:
    """Resolve a dot-separated key ("cart.add_failed")."""
    current: Any = translations
    try:
        for k in key.split("."):
            current = current[k]
    except (KeyError, TypeError):
        return None
    return current


def detect_language(language_code: str | None) -> str:
    """Normalize a language code ("pt-BR" -> "pt"), falling back to English."""
    if not language_code:
        return DEFAULT_LANGUAGE
    lang = language_code.split("-")[0].split("_")[0].lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def get_text(key: str, lang: str = DEFAULT_LANGUAGE, default: str | None = None, **kwargs) -> str:
    """
    Get translated text by key.

    Args:
        key: Translation key (e.g., "cart.add_failed")
        lang: Language code (e.g., "pt", "en")
        default: Value used if key not found (instead of returning key)
        **kwargs: Variables to format into the string

    Returns:
        Translated string or key/default if not found
    """
    lang = detect_language(lang)

    text = _lookup(_load_translations(lang), key)

    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing or a partial key pointing at a section
    if not isinstance(text, str):
        return default if default is not None else key

    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError, AttributeError):
            return text

    return text
