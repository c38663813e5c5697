"""
Application-scoped providers for dependency injection.

Each provider is cached so every caller in the process shares one instance.
Code that needs translations should receive the translator from here (or
from whoever called it) instead of importing a module global.
"""

from functools import lru_cache

from hgts.configuration import get_settings
from hgts.factory import create_translator
from hgts.translator import Translator

__all__ = ["get_settings", "get_translator"]


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    The translator starts empty, in the locales from settings. Configure it
    once at startup:

        translator = get_translator()
        translator.configure(resources, default_locale="en")

    Returns:
        Translator: Cached translator instance.
    """
    return create_translator(settings=get_settings())
