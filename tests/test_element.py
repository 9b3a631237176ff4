import threading
import time

import pytest

from internet_e2e.core.element import ElementHandle, Locator
from internet_e2e.core.errors import InteractionError, NotFoundError, WaitTimeoutError
from internet_e2e.models.element import Selector


def handle(browser, value):
    return ElementHandle(browser, Selector(value))


def test_absent_element_queries_return_false(browser):
    missing = handle(browser, '#missing')

    assert missing.exists() is False
    assert missing.is_displayed() is False
    assert missing.is_enabled() is False


def test_absent_element_actions_raise_not_found(browser):
    missing = handle(browser, '#missing')

    with pytest.raises(NotFoundError):
        missing.get_text()
    with pytest.raises(NotFoundError):
        missing.click()
    with pytest.raises(NotFoundError):
        missing.set_value('x')
    with pytest.raises(NotFoundError):
        missing.get_attribute('class')


def test_reads_are_idempotent(browser, driver):
    driver.add('#flash', text='hello', displayed=False)
    flash = handle(browser, '#flash')

    assert [flash.exists() for _ in range(3)] == [True, True, True]
    assert [flash.is_displayed() for _ in range(3)] == [False, False, False]


def test_every_access_requeries_the_dom(browser, driver):
    driver.add('#finish > h4', text='Loading')
    finish = handle(browser, '#finish > h4')
    assert finish.get_text() == 'Loading'
    lookups = driver.lookups

    driver.add('#finish > h4', text='Hello World!')

    assert finish.get_text() == 'Hello World!'
    assert driver.lookups == lookups + 1

    driver.remove('#finish > h4')
    assert finish.exists() is False


def test_stale_element_reads_as_not_displayed(browser, driver):
    driver.add('#modal').stale = True
    modal = handle(browser, '#modal')

    assert modal.is_displayed() is False
    with pytest.raises(NotFoundError):
        modal.get_text()


def test_click_on_hidden_element_raises_interaction_error(browser, driver):
    driver.add('#start > button', displayed=False)

    with pytest.raises(InteractionError):
        handle(browser, '#start > button').click()


def test_click_on_disabled_element_raises_interaction_error(browser, driver):
    button = driver.add('#start > button', enabled=False)

    with pytest.raises(InteractionError, match='disabled'):
        handle(browser, '#start > button').click()

    assert button.clicks == 0


def test_click_on_element_detached_before_click_raises_not_found(browser, driver):
    driver.add('#start > button').stale = True

    with pytest.raises(NotFoundError):
        handle(browser, '#start > button').click()


def test_click_and_set_value(browser, driver):
    button = driver.add('button[type="submit"]')
    field = driver.add('#username')
    field.value = 'stale text'

    handle(browser, '#username').set_value('tomsmith')
    handle(browser, 'button[type="submit"]').click()

    assert field.value == 'tomsmith'
    assert button.clicks == 1


def test_get_attribute(browser, driver):
    driver.add('#flash', attributes={'class': 'flash success'})

    assert handle(browser, '#flash').get_attribute('class') == 'flash success'
    assert handle(browser, '#flash').get_attribute('id') is None


def test_wait_until_clickable_returns_once_element_becomes_clickable(browser, driver):
    button = driver.add('#start > button', displayed=False)
    timer = threading.Timer(0.05, setattr, args=(button, 'displayed', True))
    timer.start()
    try:
        handle(browser, '#start > button').wait_until_clickable(timeout=2)
    finally:
        timer.cancel()


def test_wait_until_clickable_times_out_no_earlier_than_timeout(browser, driver):
    driver.add('#start > button', enabled=False)

    started = time.monotonic()
    with pytest.raises(WaitTimeoutError) as excinfo:
        handle(browser, '#start > button').wait_until_clickable(timeout=0.2)

    assert time.monotonic() - started >= 0.2
    assert isinstance(excinfo.value, TimeoutError)


def test_wait_until_clickable_on_absent_element_times_out(browser):
    with pytest.raises(TimeoutError):
        handle(browser, '#nothing').wait_until_clickable(timeout=0.05)


def test_wait_for_displayed_uses_browser_default_timeout(browser, driver):
    driver.add('#finish > h4', displayed=False)

    started = time.monotonic()
    with pytest.raises(WaitTimeoutError):
        handle(browser, '#finish > h4').wait_for_displayed()

    assert time.monotonic() - started >= browser.wait_timeout


def test_wait_for_exist(browser, driver):
    timer = threading.Timer(0.05, driver.add, args=('#finish',))
    timer.start()
    try:
        handle(browser, '#finish').wait_for_exist(timeout=2)
    finally:
        timer.cancel()


class Screen:
    title = Locator('h1.heading')

    def __init__(self, browser):
        self.browser = browser


def test_locator_returns_fresh_handle_per_access(browser):
    screen = Screen(browser)

    first, second = screen.title, screen.title

    assert isinstance(first, ElementHandle)
    assert first is not second
    assert first.selector == second.selector == Selector('h1.heading')


def test_locator_is_read_only(browser):
    screen = Screen(browser)

    with pytest.raises(AttributeError):
        screen.title = 'something else'
    assert isinstance(Screen.title, Locator)
    assert Screen.title.name == 'title'
