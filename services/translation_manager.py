# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from app.config import Config
from services.translations.ar import AR_TRANSLATIONS
from services.translations.en import EN_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton Translation Manager. Unknown keys translate to themselves."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._translations = {
                "ar": AR_TRANSLATIONS,
                "en": EN_TRANSLATIONS,
            }
            cls._instance._current_language = (
                Config.DEFAULT_LANGUAGE
                if Config.DEFAULT_LANGUAGE in cls._instance._translations else "ar"
            )
        return cls._instance

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            lang_code = "ar"
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.warning(f"Bad placeholders for translation key: {key}")
        return translation

    def has_key(self, key: str) -> bool:
        return key in self._translations.get(self._current_language, {})


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def has_translation(key: str) -> bool:
    return _translator.has_key(key)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
