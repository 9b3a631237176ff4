# config/settings.py
import logging
import os
from typing import Dict, Optional

from internet_e2e.config.merge import deep_merge
from internet_e2e.config.profiles import BASE_PROFILE, PROFILES
from internet_e2e.core.errors import ConfigurationError
from internet_e2e.models.settings import Capability, SuiteSettings

logger = logging.getLogger(__name__)


class Config:
    PROFILE = os.getenv('E2E_PROFILE', 'devtools-edge')
    BASE_URL = os.getenv('BASE_URL')
    HEADLESS = os.getenv('HEADLESS')
    WAIT_TIMEOUT = os.getenv('WAIT_TIMEOUT')
    EXPECT_TIMEOUT = os.getenv('EXPECT_TIMEOUT')
    PORT = int(os.getenv('PORT', 8765))
    SITE_LOADING_DELAY = float(os.getenv('SITE_LOADING_DELAY', 1.0))


LOG_LEVELS = {
    'trace': logging.DEBUG,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
    'silent': logging.CRITICAL + 10,
}


def log_level_for(settings: SuiteSettings) -> int:
    if settings.debug:
        return logging.DEBUG
    return LOG_LEVELS.get(settings.log_level.lower(), logging.INFO)


def _env_overrides(config=Config) -> Dict:
    overrides = {}
    if config.HEADLESS:
        overrides['headless'] = config.HEADLESS.lower() == 'true'
    if config.BASE_URL:
        overrides['base_url'] = config.BASE_URL
    if config.WAIT_TIMEOUT:
        overrides['wait_timeout'] = float(config.WAIT_TIMEOUT)
    if config.EXPECT_TIMEOUT:
        overrides['expect_timeout'] = float(config.EXPECT_TIMEOUT)
    return overrides


def merge_profile(profile: str, overrides: Optional[Dict] = None, config=Config) -> Dict:
    if profile not in PROFILES:
        raise ConfigurationError(f"Unknown profile '{profile}'. Available: {', '.join(sorted(PROFILES))}")
    merged = deep_merge(BASE_PROFILE, PROFILES[profile])
    merged = deep_merge(merged, _env_overrides(config))
    if overrides:
        merged = deep_merge(merged, overrides)
    return merged


def load_settings(profile: Optional[str] = None, overrides: Optional[Dict] = None, config=Config) -> SuiteSettings:
    profile = profile or config.PROFILE
    merged = merge_profile(profile, overrides, config)
    capabilities = []
    for raw in merged.get('capabilities', []):
        raw = dict(raw)
        capabilities.append(Capability(
            browser_name=raw.pop('browser_name', 'chrome'),
            max_instances=int(raw.pop('max_instances', 1)),
            accept_insecure_certs=bool(raw.pop('accept_insecure_certs', False)),
            extra=raw,
        ))
    if not capabilities:
        raise ConfigurationError(f"Profile '{profile}' defines no capabilities")
    settings = SuiteSettings(
        profile=profile,
        base_url=merged['base_url'].rstrip('/'),
        automation_protocol=merged.get('automation_protocol', 'webdriver'),
        capabilities=capabilities,
        reporters=merged.get('reporters', []),
        debug=bool(merged.get('debug', False)),
        log_level=merged.get('log_level', 'info'),
        headless=bool(merged.get('headless', True)),
        wait_timeout=float(merged.get('wait_timeout', 10.0)),
        expect_timeout=float(merged.get('expect_timeout', 3.0)),
        scenario_timeout=merged.get('scenario_timeout'),
        specs=list(merged.get('specs', [])),
    )
    logger.debug(f"Loaded settings for profile {profile}: {settings}")
    return settings
