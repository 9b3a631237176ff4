# main.py
import logging
import os
import sys

import uvicorn

from internet_e2e.config.settings import Config, load_settings, log_level_for
from internet_e2e.routes.site import create_app
from internet_e2e.services.suite_service import SuiteService


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )


def run_suite(argv) -> int:
    settings = load_settings()
    setup_logging(log_level_for(settings))
    service = SuiteService(settings)
    try:
        return service.run(extra_args=argv)
    except KeyboardInterrupt:
        logging.warning('Suite interrupted by user.')
        return 130


def run_site():
    setup_logging()
    uvicorn.run(create_app(), host='127.0.0.1', port=Config.PORT)


def main(argv=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    mode = os.getenv('MODE', 'run').lower()
    if argv and argv[0] in ('run', 'serve'):
        mode = argv.pop(0)
    if mode == 'serve':
        run_site()
        return 0
    return run_suite(argv)


if __name__ == '__main__':
    sys.exit(main())

# Usage:
#   python -m internet_e2e.main                 # run the specs (profile from E2E_PROFILE)
#   python -m internet_e2e.main serve           # local fixture site on PORT
#   E2E_PROFILE=local python -m internet_e2e.main run -k login
