import locale
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Collator = Callable[[str, str], int]
CaseFold = Callable[[str], str]


class LocaleCollator:
    """Orders entry names with the C library collation of a locale.

    An empty or missing locale name adopts the collation of the user's
    environment (LANG, LC_ALL, LC_COLLATE).
    """

    def __init__(self, locale_name: Optional[str] = None) -> None:
        self.locale_name = ""
        if locale_name:
            try:
                self.locale_name = locale.setlocale(locale.LC_COLLATE, locale_name)
                return
            except locale.Error:
                logger.warning("Unsupported locale %r, using the environment default", locale_name)
        try:
            self.locale_name = locale.setlocale(locale.LC_COLLATE, "")
        except locale.Error:
            logger.warning("Environment locale is not available, keeping %r", locale.setlocale(locale.LC_COLLATE))

    def __call__(self, lhs: str, rhs: str) -> int:
        result = locale.strcoll(lhs, rhs)
        if result < 0:
            return -1
        if result > 0:
            return 1
        return 0


def default_case_fold(text: str) -> str:
    return text.casefold()
