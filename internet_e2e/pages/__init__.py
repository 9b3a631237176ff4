from internet_e2e.pages.dynamic_loading import DynamicLoadingPage, dynamic_loading_1, dynamic_loading_2
from internet_e2e.pages.entry_ad import EntryAdPage, entry_ad_page
from internet_e2e.pages.home import HomePage, home_page
from internet_e2e.pages.login import LoginPage, login_page
from internet_e2e.pages.page import Page
from internet_e2e.pages.secure import SecurePage, secure_page

__all__ = [
    'Page',
    'HomePage', 'home_page',
    'LoginPage', 'login_page',
    'SecurePage', 'secure_page',
    'DynamicLoadingPage', 'dynamic_loading_1', 'dynamic_loading_2',
    'EntryAdPage', 'entry_ad_page',
]
