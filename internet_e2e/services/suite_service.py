# services/suite_service.py
import logging
from pathlib import Path
from typing import List, Optional

import pytest

from internet_e2e.models.settings import SuiteSettings

SPECS_DIR = Path(__file__).resolve().parent.parent / 'specs'
SETTINGS_KEY = pytest.StashKey[SuiteSettings]()


class SettingsPlugin:
    """Hands the already loaded settings to the spec conftest."""

    def __init__(self, settings: SuiteSettings):
        self.settings = settings

    def pytest_configure(self, config):
        config.stash[SETTINGS_KEY] = self.settings


class SuiteService:
    def __init__(self, settings: SuiteSettings):
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def _reporter_args(self) -> List[str]:
        args = []
        for reporter in self.settings.reporters:
            name = reporter[0] if isinstance(reporter, (list, tuple)) else reporter
            if name == 'spec':
                args.append('-v')
            elif name == 'dot':
                args.append('-q')
            else:
                self.logger.warning(f"Reporter '{name}' is not supported, ignoring it")
        return args

    def build_args(self, specs: Optional[List[str]] = None, extra_args: Optional[List[str]] = None) -> List[str]:
        targets = specs or self.settings.specs or [str(SPECS_DIR)]
        args = list(targets)
        args.extend(self._reporter_args())
        if self.settings.scenario_timeout:
            # pytest-timeout fails the scenario once it runs past the limit
            args.append(f'--timeout={int(self.settings.scenario_timeout)}')
        args.extend(['-p', 'no:cacheprovider'])
        if extra_args:
            args.extend(extra_args)
        return args

    def run(self, specs: Optional[List[str]] = None, extra_args: Optional[List[str]] = None) -> int:
        args = self.build_args(specs, extra_args)
        self.logger.info(f"Running specs for profile {self.settings.profile}: pytest {' '.join(args)}")
        exit_code = int(pytest.main(args, plugins=[SettingsPlugin(self.settings)]))
        if exit_code == 0:
            self.logger.info('All scenarios passed')
        else:
            self.logger.warning(f"Suite finished with exit code {exit_code}")
        return exit_code
