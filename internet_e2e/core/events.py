# core/events.py
import json
import logging
from collections import defaultdict
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class NetworkEvents:
    """CDP network events read back from the driver's performance log.

    Events are delivered only when ``pump()`` runs, so a listener may be
    called zero or more times and in no particular order relative to the
    scenario. Treat deliveries as diagnostics.
    """

    def __init__(self, driver, log_type: str = 'performance'):
        self.driver = driver
        self.log_type = log_type
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)
        self.enabled = False

    def enable(self, domain: str = 'Network') -> None:
        self.driver.execute_cdp_cmd(f'{domain}.enable', {})
        self.enabled = True
        logger.info(f"CDP domain {domain} enabled")

    def on(self, event_name: str, callback: Callable[[Dict], None]) -> None:
        self._listeners[event_name].append(callback)

    def pump(self) -> int:
        delivered = 0
        for entry in self.driver.get_log(self.log_type):
            try:
                message = json.loads(entry['message'])['message']
            except (KeyError, TypeError, ValueError):
                logger.debug(f"Skipping unreadable log entry: {entry!r}")
                continue
            for callback in self._listeners.get(message.get('method'), ()):
                callback(message.get('params', {}))
                delivered += 1
        return delivered
