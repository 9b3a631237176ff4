# core/driver_factory.py
import logging

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from internet_e2e.core.browser import Browser
from internet_e2e.core.errors import ConfigurationError
from internet_e2e.models.settings import Capability, SuiteSettings

logger = logging.getLogger(__name__)

BROWSERS = {
    'chrome': (ChromeOptions, webdriver.Chrome, 'goog:loggingPrefs'),
    'microsoftedge': (EdgeOptions, webdriver.Edge, 'ms:loggingPrefs'),
    'edge': (EdgeOptions, webdriver.Edge, 'ms:loggingPrefs'),
    'firefox': (FirefoxOptions, webdriver.Firefox, None),
}


def _browser_entry(capability: Capability):
    key = capability.browser_name.lower()
    if key not in BROWSERS:
        raise ConfigurationError(f"Unsupported browser '{capability.browser_name}'")
    return BROWSERS[key]


def build_options(settings: SuiteSettings):
    capability = settings.capability
    options_cls, _, logging_prefs_key = _browser_entry(capability)
    options = options_cls()
    if settings.automation_protocol == 'devtools':
        if logging_prefs_key is None:
            raise ConfigurationError(
                f"The devtools protocol needs a Chromium based browser, got '{capability.browser_name}'"
            )
        # Performance log carries the CDP events read by NetworkEvents
        options.set_capability(logging_prefs_key, {'performance': 'ALL'})
    elif settings.automation_protocol != 'webdriver':
        raise ConfigurationError(f"Unknown automation protocol '{settings.automation_protocol}'")
    if settings.headless:
        options.add_argument('--headless=new' if logging_prefs_key else '-headless')
    if logging_prefs_key:
        options.add_argument('--no-sandbox')
        options.add_argument('--disable-dev-shm-usage')
        options.add_argument('--window-size=1920,1080')
    options.accept_insecure_certs = capability.accept_insecure_certs
    for name, value in capability.extra.items():
        options.set_capability(name, value)
    return options


def create_driver(settings: SuiteSettings):
    if len(settings.capabilities) > 1:
        logger.warning(f"{len(settings.capabilities)} capabilities configured, only the first one is used")
    _, driver_cls, _ = _browser_entry(settings.capability)
    options = build_options(settings)
    try:
        driver = driver_cls(options=options)
    except Exception as e:
        logger.error(f"Error starting {settings.capability.browser_name} driver: {e}")
        raise
    logger.info(f"Started {settings.capability.browser_name} session over {settings.automation_protocol}")
    return driver


def create_browser(settings: SuiteSettings) -> Browser:
    return Browser(
        create_driver(settings),
        settings.base_url,
        wait_timeout=settings.wait_timeout,
        expect_timeout=settings.expect_timeout,
    )
