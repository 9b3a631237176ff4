# core/element.py
import logging
from typing import Optional

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    InvalidElementStateException,
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from internet_e2e.core.errors import InteractionError, NotFoundError, WaitTimeoutError
from internet_e2e.models.element import Selector

logger = logging.getLogger(__name__)


class ElementHandle:
    """Reference to whatever element matches ``selector`` right now.

    Nothing is cached: every call queries the live DOM again, so a handle
    stays valid across navigations. Query methods (``exists``,
    ``is_displayed``) treat absence as a normal answer; action methods
    (``click``, ``get_text``, ``set_value``) raise ``NotFoundError``.
    """

    def __init__(self, browser, selector: Selector):
        self.browser = browser
        self.selector = selector

    def __repr__(self) -> str:
        return f'<ElementHandle {self.selector}>'

    def _resolve(self) -> Optional[WebElement]:
        elements = self.browser.driver.find_elements(self.selector.by, self.selector.value)
        return elements[0] if elements else None

    def _require(self) -> WebElement:
        element = self._resolve()
        if element is None:
            raise NotFoundError(f"Element '{self.selector}' not found")
        return element

    def exists(self) -> bool:
        return self._resolve() is not None

    def is_displayed(self) -> bool:
        element = self._resolve()
        if element is None:
            return False
        try:
            return element.is_displayed()
        except StaleElementReferenceException:
            return False

    def is_enabled(self) -> bool:
        element = self._resolve()
        if element is None:
            return False
        try:
            return element.is_enabled()
        except StaleElementReferenceException:
            return False

    def text_or_none(self) -> Optional[str]:
        element = self._resolve()
        if element is None:
            return None
        try:
            return element.text
        except StaleElementReferenceException:
            return None

    def get_text(self) -> str:
        element = self._require()
        try:
            return element.text
        except StaleElementReferenceException as e:
            raise NotFoundError(f"Element '{self.selector}' detached while reading text") from e

    def get_attribute(self, name: str) -> Optional[str]:
        element = self._require()
        try:
            return element.get_attribute(name)
        except StaleElementReferenceException as e:
            raise NotFoundError(f"Element '{self.selector}' detached while reading '{name}'") from e

    def click(self) -> None:
        element = self._require()
        try:
            enabled = element.is_enabled()
        except StaleElementReferenceException as e:
            raise NotFoundError(f"Element '{self.selector}' detached before click") from e
        if not enabled:
            raise InteractionError(f"Element '{self.selector}' is disabled")
        logger.debug(f"Clicking {self.selector}")
        try:
            element.click()
        except StaleElementReferenceException as e:
            raise NotFoundError(f"Element '{self.selector}' detached before click") from e
        except (InvalidElementStateException, ElementClickInterceptedException) as e:
            raise InteractionError(f"Element '{self.selector}' is not clickable: {e.msg}") from e

    def set_value(self, value: str) -> None:
        element = self._require()
        logger.debug(f"Setting value of {self.selector}")
        try:
            element.clear()
            element.send_keys(value)
        except StaleElementReferenceException as e:
            raise NotFoundError(f"Element '{self.selector}' detached before typing") from e
        except InvalidElementStateException as e:
            raise InteractionError(f"Element '{self.selector}' does not accept input: {e.msg}") from e

    def _wait(self, condition, timeout: Optional[float], what: str):
        timeout = self.browser.wait_timeout if timeout is None else timeout
        try:
            wait = WebDriverWait(
                self.browser.driver, timeout,
                poll_frequency=self.browser.poll_interval,
                ignored_exceptions=(NoSuchElementException, StaleElementReferenceException),
            )
            return wait.until(condition)
        except TimeoutException as e:
            raise WaitTimeoutError(f"Element '{self.selector}' still not {what} after {timeout}s") from e

    def wait_until_clickable(self, timeout: Optional[float] = None) -> None:
        self._wait(EC.element_to_be_clickable(self.selector.as_locator()), timeout, 'clickable')

    def wait_for_displayed(self, timeout: Optional[float] = None) -> None:
        self._wait(EC.visibility_of_element_located(self.selector.as_locator()), timeout, 'displayed')

    def wait_for_exist(self, timeout: Optional[float] = None) -> None:
        self._wait(EC.presence_of_element_located(self.selector.as_locator()), timeout, 'existing')


class Locator:
    """Declares an element on a page object.

    Reading the attribute from a page instance returns a new
    ``ElementHandle`` bound to the page's browser.
    """

    def __init__(self, value: str, by: str = By.CSS_SELECTOR):
        self.selector = Selector(value, by)
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return ElementHandle(instance.browser, self.selector)

    def __set__(self, instance, value):
        raise AttributeError(f"Locator '{self.name}' is read-only")

