# pages/dynamic_loading.py
from internet_e2e.core.element import Locator
from internet_e2e.pages.page import Page


class DynamicLoadingPage(Page):
    # Both examples share markup; only the path differs.
    start_button = Locator('#start > button')
    loading = Locator('#loading')
    hello_world = Locator('#finish > h4')

    def __init__(self, path: str):
        super().__init__(path)


dynamic_loading_1 = DynamicLoadingPage('/dynamic_loading/1')
dynamic_loading_2 = DynamicLoadingPage('/dynamic_loading/2')
