# specs/conftest.py
import pytest

from internet_e2e.config.settings import load_settings
from internet_e2e.core import session
from internet_e2e.core.driver_factory import create_browser
from internet_e2e.core.expect import expect
from internet_e2e.pages import login_page, secure_page
from internet_e2e.services.suite_service import SETTINGS_KEY
from internet_e2e.utils.http import is_reachable

USERNAME = 'tomsmith'
PASSWORD = 'SuperSecretPassword!'


@pytest.fixture(scope='session')
def suite_settings(request):
    return request.config.stash.get(SETTINGS_KEY, None) or load_settings()


@pytest.fixture(scope='session')
def site(suite_settings):
    if not is_reachable(suite_settings.base_url):
        pytest.fail(f"Base URL {suite_settings.base_url} is not reachable", pytrace=False)
    return suite_settings.base_url


@pytest.fixture(scope='module', autouse=True)
def browser(suite_settings, site):
    # One browser session per spec module; scenarios must navigate first.
    browser = create_browser(suite_settings)
    session.bind(browser)
    try:
        yield browser
    finally:
        session.release()
        browser.quit()


@pytest.fixture
def logged_in(browser):
    login_page.open()
    login_page.login(USERNAME, PASSWORD)
    expect(secure_page.flash_alert).to_be_existing()
    expect(secure_page.flash_alert).to_have_text_containing('You logged into a secure area!')
