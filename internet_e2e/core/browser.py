# core/browser.py
import logging
from typing import Callable, Dict, Optional, Union
from urllib.parse import urlencode

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait

from internet_e2e.core.element import ElementHandle
from internet_e2e.core.errors import WaitTimeoutError
from internet_e2e.core.events import NetworkEvents
from internet_e2e.models.element import Selector

logger = logging.getLogger(__name__)

POST_SCRIPT = """
    var done = arguments[arguments.length - 1];
    var xhr = new XMLHttpRequest();
    xhr.open('POST', arguments[0]);
    xhr.setRequestHeader('Content-Type', 'application/x-www-form-urlencoded');
    xhr.onload = function () { done(xhr.status); };
    xhr.onerror = function () { done(0); };
    xhr.send(arguments[1]);
"""


class Browser:
    """Thin facade over a Selenium WebDriver bound to a base URL."""

    def __init__(self, driver, base_url: str, wait_timeout: float = 10.0,
                 expect_timeout: float = 3.0, poll_interval: float = 0.5):
        self.driver = driver
        self.base_url = base_url
        self.wait_timeout = wait_timeout
        self.expect_timeout = expect_timeout
        self.poll_interval = poll_interval
        self._network_events = None

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    @property
    def title(self) -> str:
        return self.driver.title

    def resolve_url(self, path: str) -> str:
        if path.startswith(('http://', 'https://')):
            return path
        return f'{self.base_url}{path}'

    def url(self, path: str) -> None:
        target = self.resolve_url(path)
        logger.info(f"Navigating to {target}")
        self.driver.get(target)

    def element(self, value: str, by: str = By.CSS_SELECTOR) -> ElementHandle:
        return ElementHandle(self, Selector(value, by))

    __call__ = element

    def execute(self, script: str, *args):
        return self.driver.execute_script(script, *args)

    def post(self, path: str, data: Optional[Union[Dict, str]] = None) -> int:
        body = urlencode(data) if isinstance(data, dict) else (data or '')
        status = self.driver.execute_async_script(POST_SCRIPT, path, body)
        logger.debug(f"POST {path} -> {status}")
        return status

    def wait_until(self, condition: Callable[[], bool], timeout: Optional[float] = None, message: str = ''):
        timeout = self.wait_timeout if timeout is None else timeout
        try:
            return WebDriverWait(self.driver, timeout, poll_frequency=self.poll_interval).until(
                lambda driver: condition()
            )
        except TimeoutException as e:
            raise WaitTimeoutError(message or f"Condition not met after {timeout}s") from e

    def network_events(self) -> NetworkEvents:
        if self._network_events is None:
            self._network_events = NetworkEvents(self.driver)
        return self._network_events

    def quit(self) -> None:
        try:
            self.driver.quit()
            logger.info('Browser session closed')
        except Exception as e:
            logger.error(f"Error closing browser session: {e}")
