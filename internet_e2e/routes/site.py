# routes/site.py
# Local stand-in for the pages of the-internet that the specs drive.
import logging

from fastapi import APIRouter, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from internet_e2e.config.settings import Config

logger = logging.getLogger(__name__)

router = APIRouter()

USERNAME = 'tomsmith'
PASSWORD = 'SuperSecretPassword!'

FLASH_MESSAGES = {
    'logged_in': ('success', 'You logged into a secure area!'),
    'logged_out': ('success', 'You logged out of the secure area!'),
    'bad_username': ('error', 'Your username is invalid!'),
    'bad_password': ('error', 'Your password is invalid!'),
    'login_required': ('error', 'You must login to view the secure area!'),
}

# The ad shows once, then stays hidden until POST /entry-ad re-arms it
ad_state = {'armed': True}

DYNAMIC_SCRIPT = """
<script>
  document.querySelector('#start > button').addEventListener('click', function () {
    document.getElementById('start').style.display = 'none';
    document.getElementById('loading').style.display = 'block';
    setTimeout(function () {
      document.getElementById('loading').style.display = 'none';
      __REVEAL__
    }, __DELAY__);
  });
</script>
"""

REVEAL_HIDDEN = "document.getElementById('finish').style.display = 'block';"
REVEAL_RENDERED = (
    "var finish = document.createElement('div'); finish.id = 'finish';"
    " finish.innerHTML = '<h4>Hello World!</h4>';"
    " document.querySelector('.example').appendChild(finish);"
)


def _layout(title: str, body: str) -> str:
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8">'
        f'<title>{title}</title></head><body><div id="content">{body}</div></body></html>'
    )


def _flash_html(key) -> str:
    if key not in FLASH_MESSAGES:
        return ''
    kind, message = FLASH_MESSAGES[key]
    return f'<div id="flash" class="flash {kind}">{message}<a href="#" class="close">x</a></div>'


def _page_with_flash(request: Request, title: str, body: str) -> HTMLResponse:
    flash_key = request.cookies.get('flash')
    response = HTMLResponse(_layout(title, _flash_html(flash_key) + body))
    if flash_key:
        response.delete_cookie('flash')
    return response


def _redirect(url: str, flash: str) -> RedirectResponse:
    response = RedirectResponse(url, status_code=303)
    response.set_cookie('flash', flash)
    return response


@router.get('/', response_class=HTMLResponse)
def home():
    links = ''.join(
        f'<li><a href="{href}">{label}</a></li>'
        for href, label in [
            ('/login', 'Form Authentication'),
            ('/dynamic_loading/1', 'Dynamic Loading 1'),
            ('/dynamic_loading/2', 'Dynamic Loading 2'),
            ('/entry_ad', 'Entry Ad'),
        ]
    )
    return _layout('The Internet', f'<h1 class="heading">Welcome to the-internet</h1><ul>{links}</ul>')


@router.get('/login', response_class=HTMLResponse)
def login_form(request: Request):
    body = (
        '<div class="example"><h2>Login Page</h2>'
        '<form id="login" action="/authenticate" method="post">'
        '<label for="username">Username</label><input type="text" name="username" id="username">'
        '<label for="password">Password</label><input type="password" name="password" id="password">'
        '<button class="radius" type="submit">Login</button>'
        '</form></div>'
    )
    return _page_with_flash(request, 'Login Page', body)


@router.post('/authenticate')
def authenticate(username: str = Form(''), password: str = Form('')):
    if username != USERNAME:
        logger.info(f"Rejected login for unknown user {username!r}")
        return _redirect('/login', 'bad_username')
    if password != PASSWORD:
        logger.info(f"Rejected login for {username!r}: wrong password")
        return _redirect('/login', 'bad_password')
    response = _redirect('/secure', 'logged_in')
    response.set_cookie('auth', username)
    return response


@router.get('/secure', response_class=HTMLResponse)
def secure_area(request: Request):
    if request.cookies.get('auth') != USERNAME:
        return _redirect('/login', 'login_required')
    body = (
        '<div class="example"><h2>Secure Area</h2>'
        '<h4 class="subheader">Welcome to the Secure Area.</h4>'
        '<a class="button secondary radius" href="/logout">Logout</a></div>'
    )
    return _page_with_flash(request, 'Secure Area', body)


@router.get('/logout')
def logout():
    response = _redirect('/login', 'logged_out')
    response.delete_cookie('auth')
    return response


@router.get('/dynamic_loading/{variant}', response_class=HTMLResponse)
def dynamic_loading(variant: int):
    if variant == 1:
        finish = '<div id="finish" style="display:none"><h4>Hello World!</h4></div>'
        reveal = REVEAL_HIDDEN
    elif variant == 2:
        finish = ''
        reveal = REVEAL_RENDERED
    else:
        raise HTTPException(status_code=404, detail=f"No dynamic loading example {variant}")
    delay_ms = int(Config.SITE_LOADING_DELAY * 1000)
    script = DYNAMIC_SCRIPT.replace('__REVEAL__', reveal).replace('__DELAY__', str(delay_ms))
    body = (
        f'<div class="example"><h3>Dynamically Loaded Page Elements</h3>'
        f'<h4>Example {variant}</h4>'
        '<div id="start"><button>Start</button></div>'
        '<div id="loading" style="display:none">Loading... </div>'
        f'{finish}</div>{script}'
    )
    return _layout('Dynamic Loading', body)


@router.get('/entry_ad', response_class=HTMLResponse)
def entry_ad():
    show = ad_state['armed']
    ad_state['armed'] = False
    display = 'block' if show else 'none'
    body = (
        '<div class="example"><h3>Entry Ad</h3>'
        '<p>Displays an ad on page load.</p></div>'
        f'<div id="modal" class="modal" style="display: {display}">'
        '<div class="modal-title"><h3>This is a modal window</h3></div>'
        '<div class="modal-body"><p>It is used to display an entry ad.</p></div>'
        '<div class="modal-footer">'
        '<p onclick="document.getElementById(\'modal\').style.display=\'none\'">Close</p>'
        '</div></div>'
    )
    return _layout('Entry Ad', body)


@router.post('/entry-ad', response_class=PlainTextResponse)
def reset_entry_ad():
    ad_state['armed'] = True
    logger.info('Entry ad re-armed')
    return 'ok'


def create_app() -> FastAPI:
    app = FastAPI(title='internet-e2e fixture site')
    app.include_router(router)
    return app
