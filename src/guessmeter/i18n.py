"""Localization of feedback phrases.

Translations are flat JSON objects mapping an English phrase to its
translation, bundled as ``data/lang/<code>.json``. A missing or unreadable
file never raises: feedback simply stays in English.
"""
from __future__ import annotations

import json
import logging
import re
from importlib import resources
from typing import Literal, Mapping

from guessmeter.feedback import Feedback

logger = logging.getLogger(__name__)

Lang = Literal["cs", "ru"]
AVAILABLE_LANGUAGES: tuple[Lang, ...] = ("cs", "ru")

LANG_RESOURCE_DIR = "data/lang"
_LANG_CODE_RX = re.compile(r"^[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]{2,8})?$")

Translations = Mapping[str, str]


def load_translations(code: str) -> dict[str, str]:
    """Return the phrase map for ``code``, or an empty map if there is none."""
    if not _LANG_CODE_RX.match(code):
        logger.debug("Ignoring malformed language code %r", code)
        return {}

    resource = resources.files("guessmeter").joinpath(f"{LANG_RESOURCE_DIR}/{code}.json")
    try:
        data = json.loads(resource.read_text(encoding="utf-8"))
    except (FileNotFoundError, OSError, json.JSONDecodeError) as exc:
        logger.debug("No usable translations for %r: %s", code, exc)
        return {}

    if not isinstance(data, dict):
        logger.debug("Translations for %r are not a JSON object", code)
        return {}
    return {phrase: text for phrase, text in data.items() if isinstance(text, str) and text}


def translate(phrase: str, translations: Translations) -> str:
    """Exact-string lookup, falling back to the phrase itself."""
    return translations.get(phrase) or phrase


def translate_feedback(feedback: Feedback, translations: Translations) -> Feedback:
    if not translations:
        return feedback
    return Feedback(
        warning=translate(feedback.warning, translations) if feedback.warning else "",
        suggestions=[translate(suggestion, translations) for suggestion in feedback.suggestions],
    )
