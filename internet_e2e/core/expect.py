# core/expect.py
import logging
from typing import Callable, Optional

from internet_e2e.core.element import ElementHandle
from internet_e2e.core.errors import AssertionFailure, WaitTimeoutError

logger = logging.getLogger(__name__)


class Expectation:
    """Polling matchers over an ElementHandle.

    A matcher re-checks the element until it passes or the timeout runs
    out, then raises AssertionFailure.
    """

    def __init__(self, handle: ElementHandle, timeout: Optional[float] = None, negate: bool = False):
        self.handle = handle
        self.timeout = timeout
        self.negate = negate

    @property
    def not_(self) -> 'Expectation':
        return Expectation(self.handle, self.timeout, not self.negate)

    def _timeout(self) -> float:
        if self.timeout is not None:
            return self.timeout
        return self.handle.browser.expect_timeout

    def _check(self, predicate: Callable[[], bool], expected: str, actual: Callable[[], object]) -> None:
        wanted = not self.negate
        try:
            self.handle.browser.wait_until(lambda: predicate() == wanted, timeout=self._timeout())
        except WaitTimeoutError:
            prefix = 'not ' if self.negate else ''
            raise AssertionFailure(
                f"Expected {self.handle.selector} {prefix}{expected}, got {actual()!r}"
            ) from None
        logger.debug(f"{self.handle.selector} {'not ' if self.negate else ''}{expected}")

    def to_exist(self) -> None:
        self._check(self.handle.exists, 'to exist', lambda: 'present' if self.handle.exists() else 'absent')

    to_be_existing = to_exist

    def to_be_displayed(self) -> None:
        self._check(
            self.handle.is_displayed, 'to be displayed',
            lambda: 'displayed' if self.handle.is_displayed() else 'not displayed',
        )

    def to_have_text(self, text: str) -> None:
        self._check(lambda: self.handle.text_or_none() == text, f'to have text {text!r}', self.handle.text_or_none)

    def to_have_text_containing(self, text: str) -> None:
        self._check(
            lambda: text in (self.handle.text_or_none() or ''),
            f'to have text containing {text!r}', self.handle.text_or_none,
        )


def expect(handle: ElementHandle, timeout: Optional[float] = None) -> Expectation:
    return Expectation(handle, timeout)
