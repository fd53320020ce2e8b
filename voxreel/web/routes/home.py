"""Landing page with the script editor and lyric player."""

from __future__ import annotations

import flask
from common import config, lyric_timing
from services import tts_voices
from web.routes import web_bp
from web.utils.responses import html_response


@web_bp.route('/')
def index():
  """Render the generator page."""
  html = flask.render_template(
    'index.html',
    voices=tts_voices.all_presets(),
    default_voice=tts_voices.DEFAULT_VOICE,
    initial_clock=lyric_timing.format_clock(0),
    download_filename=config.DOWNLOAD_FILENAME,
    audio_mime_type=config.AUDIO_MIME_TYPE,
  )
  return html_response(html, cache_seconds=300, cdn_seconds=1800)
