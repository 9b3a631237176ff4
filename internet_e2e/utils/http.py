# utils/http.py
import logging
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


def get_status_codes(url: str, timeout: float = 5) -> Optional[List[int]]:
    """Status codes along the redirect chain of ``url``, or None when unreachable."""
    try:
        response = requests.head(url, allow_redirects=True, timeout=timeout)
        return [r.status_code for r in response.history] + [response.status_code]
    except requests.RequestException as e:
        logger.warning(f"{url} is unreachable: {e}")
        return None


def is_reachable(url: str, timeout: float = 5) -> bool:
    codes = get_status_codes(url, timeout)
    return bool(codes) and codes[-1] < 500
