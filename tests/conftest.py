import json

import pytest
from selenium.common.exceptions import (
    ElementNotInteractableException,
    NoSuchElementException,
    StaleElementReferenceException,
)
from selenium.webdriver.common.by import By

from internet_e2e.core import session
from internet_e2e.core.browser import Browser

BASE_URL = 'https://the-internet.herokuapp.com'


class FakeElement:
    def __init__(self, text='', displayed=True, enabled=True, interactable=True, attributes=None, on_click=None):
        self._text = text
        self.displayed = displayed
        self.enabled = enabled
        self.interactable = interactable
        self.attributes = attributes or {}
        self.on_click = on_click
        self.stale = False
        self.value = ''
        self.clicks = 0

    def _check_attached(self):
        if self.stale:
            raise StaleElementReferenceException('stale element reference')

    def _check_interactable(self):
        self._check_attached()
        if not (self.displayed and self.interactable):
            raise ElementNotInteractableException('element not interactable')

    @property
    def text(self):
        self._check_attached()
        return self._text if self.displayed else ''

    def is_displayed(self):
        self._check_attached()
        return self.displayed

    def is_enabled(self):
        self._check_attached()
        return self.enabled

    def get_attribute(self, name):
        self._check_attached()
        return self.attributes.get(name)

    def click(self):
        self._check_interactable()
        self.clicks += 1
        if self.on_click:
            self.on_click()

    def clear(self):
        self._check_interactable()
        self.value = ''

    def send_keys(self, value):
        self._check_interactable()
        self.value += value


class FakeDriver:
    """Just enough of a WebDriver for ElementHandle, Browser and WebDriverWait."""

    def __init__(self):
        self.elements = {}
        self.current_url = 'about:blank'
        self.title = ''
        self.visited = []
        self.lookups = 0
        self.scripts = []
        self.async_result = 200
        self.cdp_commands = []
        self.log_entries = []
        self.quit_called = False

    def add(self, selector, by=By.CSS_SELECTOR, **kwargs):
        element = FakeElement(**kwargs)
        self.elements[(by, selector)] = element
        return element

    def remove(self, selector, by=By.CSS_SELECTOR):
        return self.elements.pop((by, selector), None)

    def find_elements(self, by, value):
        self.lookups += 1
        element = self.elements.get((by, value))
        return [element] if element is not None else []

    def find_element(self, by, value):
        found = self.find_elements(by, value)
        if not found:
            raise NoSuchElementException(f'no such element: {value}')
        return found[0]

    def get(self, url):
        self.current_url = url
        self.visited.append(url)

    def execute_script(self, script, *args):
        self.scripts.append((script, args))

    def execute_async_script(self, script, *args):
        self.scripts.append((script, args))
        return self.async_result

    def execute_cdp_cmd(self, cmd, params):
        self.cdp_commands.append((cmd, params))
        return {}

    def push_cdp_event(self, method, params):
        self.log_entries.append({
            'level': 'INFO',
            'message': json.dumps({'message': {'method': method, 'params': params}}),
        })

    def get_log(self, log_type):
        entries, self.log_entries = self.log_entries, []
        return entries

    def quit(self):
        self.quit_called = True


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def browser(driver):
    return Browser(driver, BASE_URL, wait_timeout=0.3, expect_timeout=0.3, poll_interval=0.02)


@pytest.fixture
def bound_browser(browser):
    session.bind(browser)
    yield browser
    session.release()
