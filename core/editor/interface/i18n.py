"""Status-line message lookup.

Messages live in LANG_PACK keyed by language code. A key missing from a
language is served from the English table.
"""

import os
from collections import ChainMap
from typing import Mapping, Optional

from config import get_user_lang
from core.editor.interface.constants import LANG_PACK

FALLBACK_LANG = "en"
LANG_ENV = "TUIDO_LANG"


def messages(lang: str) -> Mapping[str, str]:
    fallback = LANG_PACK[FALLBACK_LANG]
    if lang == FALLBACK_LANG or lang not in LANG_PACK:
        return fallback
    return ChainMap(LANG_PACK[lang], fallback)


def effective_lang(preferred: Optional[str] = None) -> str:
    """TUIDO_LANG wins; under pytest English is forced; then preferred, then config."""
    forced = os.getenv(LANG_ENV)
    if forced in LANG_PACK:
        return forced
    if os.getenv("PYTEST_CURRENT_TEST"):
        return FALLBACK_LANG
    candidate = preferred or get_user_lang()
    return candidate if candidate in LANG_PACK else FALLBACK_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    template = messages(effective_lang(lang)).get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        # message shown without its placeholders filled
        return template


__all__ = ["FALLBACK_LANG", "effective_lang", "messages", "translate"]
