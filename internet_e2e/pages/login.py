# pages/login.py
from internet_e2e.core.element import Locator
from internet_e2e.pages.page import Page


class LoginPage(Page):
    path = '/login'

    username = Locator('#username')
    password = Locator('#password')
    submit = Locator('button[type="submit"]')
    flash = Locator('#flash')

    def login(self, username: str, password: str) -> None:
        self.username.set_value(username)
        self.password.set_value(password)
        self.submit.click()


login_page = LoginPage()
