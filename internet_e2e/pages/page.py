# pages/page.py
import logging
from typing import Optional

from internet_e2e.core import session

logger = logging.getLogger(__name__)


class Page:
    """Base page object.

    Subclasses declare their elements as ``Locator`` class attributes and
    set ``path``; navigation itself lives only here. Pages keep no state of
    their own, so one module-level instance serves the whole run.
    """

    path = '/'

    def __init__(self, path: Optional[str] = None):
        if path is not None:
            self.path = path

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.path}>'

    @property
    def browser(self):
        return session.current()

    def open(self, path: Optional[str] = None) -> None:
        self.browser.url(self.path if path is None else path)
