# pages/home.py
from internet_e2e.core.element import Locator
from internet_e2e.pages.page import Page


class HomePage(Page):
    path = '/'

    heading = Locator('h1.heading')


home_page = HomePage()
