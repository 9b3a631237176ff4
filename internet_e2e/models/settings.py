# models/settings.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Capability:
    browser_name: str = 'chrome'
    max_instances: int = 1
    accept_insecure_certs: bool = False
    extra: Dict = field(default_factory=dict)


@dataclass
class SuiteSettings:
    profile: str
    base_url: str
    automation_protocol: str = 'webdriver'
    capabilities: List[Capability] = field(default_factory=list)
    reporters: List = field(default_factory=list)
    debug: bool = False
    log_level: str = 'info'
    headless: bool = True
    wait_timeout: float = 10.0
    expect_timeout: float = 3.0
    scenario_timeout: Optional[float] = None
    specs: List[str] = field(default_factory=list)

    @property
    def capability(self) -> Capability:
        return self.capabilities[0] if self.capabilities else Capability()
