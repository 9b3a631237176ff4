# pages/entry_ad.py
import logging

from internet_e2e.core.element import Locator
from internet_e2e.pages.page import Page

logger = logging.getLogger(__name__)


class EntryAdPage(Page):
    path = '/entry_ad'
    reset_path = '/entry-ad'

    modal = Locator('#modal')
    modal_close = Locator('#modal .modal-footer p')
    example = Locator('.example')

    def reset_ad(self) -> int:
        """Re-arm the ad so the next page load shows the modal again."""
        status = self.browser.post(self.reset_path)
        logger.debug(f"Entry ad reset returned {status}")
        return status


entry_ad_page = EntryAdPage()
