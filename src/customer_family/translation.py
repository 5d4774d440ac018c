"""Translation of labels and violation messages."""
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Tuple

MESSAGE_DOMAIN: str = "customerfamily"

DEFAULT_LOCALE: str = "en_US"


class Translator(ABC):
    """Message translation service provided by the host platform."""

    @abstractmethod
    def translate(
        self,
        message_id: str,
        parameters: Optional[Mapping[str, str]] = None,
        domain: str = MESSAGE_DOMAIN,
    ) -> str:
        """Translate ``message_id`` within ``domain``.

        Unknown messages translate to their own id.
        """


def _apply_parameters(text: str, parameters: Optional[Mapping[str, str]]) -> str:
    # Placeholders are written "%name%" and the keys carry the percent signs.
    if not parameters:
        return text
    for placeholder, value in parameters.items():
        text = text.replace(placeholder, value)
    return text


class MessageCatalogTranslator(Translator):
    """Translator over an in-memory ``(locale, domain) -> {id: text}`` table."""

    def __init__(
        self,
        messages: Optional[Mapping[Tuple[str, str], Mapping[str, str]]] = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._messages: Dict[Tuple[str, str], Dict[str, str]] = {
            key: dict(table) for key, table in (messages or {}).items()
        }
        self.locale = locale

    def add_messages(
        self,
        table: Mapping[str, str],
        domain: str = MESSAGE_DOMAIN,
        locale: Optional[str] = None,
    ) -> None:
        key = (locale or self.locale, domain)
        self._messages.setdefault(key, {}).update(table)

    def translate(
        self,
        message_id: str,
        parameters: Optional[Mapping[str, str]] = None,
        domain: str = MESSAGE_DOMAIN,
    ) -> str:
        table = self._messages.get((self.locale, domain), {})
        return _apply_parameters(table.get(message_id, message_id), parameters)
