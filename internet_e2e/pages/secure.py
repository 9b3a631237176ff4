# pages/secure.py
from internet_e2e.core.element import Locator
from internet_e2e.pages.page import Page


class SecurePage(Page):
    path = '/secure'

    flash_alert = Locator('#flash')
    logout_button = Locator('a[href="/logout"]')


secure_page = SecurePage()
