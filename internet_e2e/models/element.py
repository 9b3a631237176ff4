# models/element.py
from dataclasses import dataclass

from selenium.webdriver.common.by import By


@dataclass(frozen=True)
class Selector:
    value: str
    by: str = By.CSS_SELECTOR

    def as_locator(self) -> tuple:
        return (self.by, self.value)

    def __str__(self) -> str:
        if self.by == By.CSS_SELECTOR:
            return self.value
        return f'{self.by}={self.value}'
