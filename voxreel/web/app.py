"""Flask app initialization for the VoxReel web layer."""

from __future__ import annotations

import datetime
import os

import flask
# Import route modules for side-effects (route registration on `web_bp`).
import web.routes.api as _api  # noqa: E402,F401
import web.routes.home as _home  # noqa: E402,F401
from common import config
from firebase_functions import logger
from services import tts_relay
from web.routes import web_bp
from web.utils.responses import json_error_response

_TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), 'templates')
_STATIC_DIR = os.path.join(os.path.dirname(__file__), 'static')


def _load_css(filename: str) -> str:
  """Load a CSS file from the static directory."""
  css_path = os.path.join(_STATIC_DIR, 'css', filename)
  try:
    with open(css_path, 'r', encoding='utf-8') as css_file:
      return css_file.read()
  except FileNotFoundError:
    logger.error(f'Stylesheet missing at {css_path}')
    return ''


_SITE_CSS = _load_css('base.css') + _load_css('style.css')

app = flask.Flask(__name__,
                  template_folder=_TEMPLATES_DIR,
                  static_folder=_STATIC_DIR)
app.config['MAX_CONTENT_LENGTH'] = config.MAX_REQUEST_BYTES
# Built once from the environment; tests swap in their own relay.
app.config['TTS_RELAY'] = tts_relay.TtsRelay(config.RelayConfig.from_env())


@app.before_request
def _strip_trailing_slash() -> flask.Response | None:
  path = flask.request.path
  if path != "/" and path.endswith("/"):
    canonical_path = path.rstrip("/") or "/"
    query_string = flask.request.query_string
    if query_string:
      canonical_path = (f"{canonical_path}?"
                        f"{query_string.decode('utf-8', 'ignore')}")
    return flask.redirect(canonical_path, code=308)
  return None


@app.errorhandler(413)
def _request_too_large(_error) -> flask.Response:
  """Reply with JSON when a request body exceeds MAX_CONTENT_LENGTH."""
  logger.warn(f'Request body too large on {flask.request.path}')
  return json_error_response('Request body too large', status=413)


@app.context_processor
def _inject_template_globals() -> dict[str, object]:
  """Inject shared template variables such as compiled CSS."""
  return {
    'site_css': _SITE_CSS,
    'site_name': 'VoxReel',
    'now_utc': datetime.datetime.now(datetime.timezone.utc),
  }


# Register blueprint at import time so Cloud Functions can dispatch.
app.register_blueprint(web_bp)
