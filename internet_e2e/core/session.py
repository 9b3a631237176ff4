# core/session.py
import logging
from typing import Optional

from internet_e2e.core.errors import SessionError

logger = logging.getLogger(__name__)

_current = None


def bind(browser) -> None:
    global _current
    if _current is not None and _current is not browser:
        logger.warning('Replacing an already bound browser session')
    _current = browser


def release() -> Optional[object]:
    global _current
    browser, _current = _current, None
    return browser


def current():
    if _current is None:
        raise SessionError('No browser session is bound; call session.bind(browser) first')
    return _current


def is_bound() -> bool:
    return _current is not None
