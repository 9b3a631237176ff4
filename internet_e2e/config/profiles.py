# config/profiles.py
# Keys mirror the runner options they come from: capabilities, reporters and
# specs are lists and are replaced, not extended, by a profile override.

BASE_PROFILE = {
    'base_url': 'https://the-internet.herokuapp.com',
    'debug': False,
    'log_level': 'info',
    'automation_protocol': 'webdriver',
    'headless': True,
    'wait_timeout': 10.0,
    'expect_timeout': 3.0,
    'scenario_timeout': 60.0,
    'capabilities': [{
        'browser_name': 'chrome',
        'max_instances': 5,
        'accept_insecure_certs': True,
    }],
    'reporters': ['spec'],
    'specs': [],
}

PROFILES = {
    'default': {},
    # Chromium-based Edge driven over the devtools protocol. The long
    # scenario timeout keeps the browser open while debugging.
    'devtools-edge': {
        'debug': False,
        'log_level': 'warn',
        'automation_protocol': 'devtools',
        'capabilities': [{
            'max_instances': 1,
            'browser_name': 'MicrosoftEdge',
            'accept_insecure_certs': True,
        }],
        'scenario_timeout': 1200.0,
        'reporters': [
            ['video', {'save_all_videos': False, 'video_slowdown_multiplier': 3}],
            ['allure', {
                'output_dir': 'allure-results',
                'disable_webdriver_steps_reporting': True,
                'disable_webdriver_screenshots_reporting': False,
            }],
            'spec',
        ],
    },
    'chrome': {
        'automation_protocol': 'devtools',
        'capabilities': [{'browser_name': 'chrome', 'max_instances': 1}],
    },
    'local': {
        'base_url': 'http://127.0.0.1:8765',
        'wait_timeout': 5.0,
        'capabilities': [{'browser_name': 'chrome', 'max_instances': 1}],
    },
}
