"""UI binding for the translator.

A binding keeps its own copy of the current language so a UI layer can
re-render when it changes. The translator never pushes notifications; the
binding notifies its subscribers after a successful switch.
"""

from typing import Any, Callable, List, Mapping, Optional

from hgts.logging import get_logger
from hgts.translator import Translator

logger = get_logger(__name__)

LanguageListener = Callable[[str], None]


class TranslationBinding:
    """Thin facade over a Translator for UI components.

    All translation work is delegated to the translator; the binding only
    tracks ``language`` as local render state.

    Usage:
        binding = TranslationBinding(translator)
        unsubscribe = binding.subscribe(lambda locale: view.refresh())

        label = binding.t("greeting")
        binding.change_language("es")  # refreshes the view
    """

    def __init__(self, translator: Translator):
        """Initialize the binding.

        Args:
            translator: Configured Translator instance to proxy.
        """
        self._translator = translator
        self._listeners: List[LanguageListener] = []
        self.language = translator.get_language()

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a key; see ``Translator.translate``."""
        return self._translator.translate(key, params)

    def change_language(self, locale: str) -> None:
        """Switch the translator's language, then update local state.

        Raises:
            LocaleNotFoundError: If locale has no resources. Local state and
                subscribers are left untouched.
        """
        self._translator.change_language(locale)
        self.language = locale
        for listener in list(self._listeners):
            listener(locale)
        logger.debug(
            "binding_language_changed",
            locale=locale,
            listener_count=len(self._listeners),
        )

    def available_languages(self) -> list:
        """Get the translator's configured locale codes."""
        return self._translator.get_available_languages()

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register a callback invoked with the new locale after each switch.

        Returns:
            A function that removes the callback.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def translator(self) -> Translator:
        """Access the underlying Translator."""
        return self._translator
