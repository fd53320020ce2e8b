"""JSON API routes: speech generation, voice presets and lyric lines."""

from __future__ import annotations

import math
import traceback
from typing import Any

import flask
from common import lyric_timing
from firebase_functions import logger
from services import tts_relay, tts_voices
from web.routes import web_bp
from web.utils.responses import json_error_response, json_response


def _get_relay() -> tts_relay.TtsRelay:
  return flask.current_app.config['TTS_RELAY']


def _json_body() -> dict[str, Any]:
  body = flask.request.get_json(silent=True)
  return body if isinstance(body, dict) else {}


def _parse_seconds(value: Any) -> float | None:
  """Parse a playback time in seconds; None if the value is not a number."""
  if value is None:
    return 0.0
  if isinstance(value, bool) or not isinstance(value, (int, float)):
    return None
  seconds = float(value)
  if math.isnan(seconds):
    # The audio element reports NaN before its metadata loads.
    return 0.0
  return seconds


def _parse_overflow(value: Any) -> lyric_timing.LineOverflow | None:
  if value is None:
    return lyric_timing.LineOverflow.FIRST_LINE
  try:
    return lyric_timing.LineOverflow(value)
  except ValueError:
    return None


@web_bp.route('/api/tts', methods=['POST'])
def generate_speech() -> flask.Response:
  """Synthesize the posted text and return base64 audio plus its lines."""
  body = _json_body()
  text = body.get('text')
  voice_id = body.get('voiceId')
  if not isinstance(voice_id, str):
    voice_id = None

  try:
    result = _get_relay().generate(text, voice_id=voice_id)
  except tts_relay.InvalidTextError as e:
    return json_error_response(str(e), status=400)
  except tts_relay.RelayConfigurationError:
    return json_error_response('Server misconfiguration', status=500)
  except tts_relay.RelayProviderError as e:
    logger.error(f'TTS generation failed: {e.__cause__}')
    return json_error_response(str(e), status=500)
  except Exception as e:  # pylint: disable=broad-except
    logger.error(f'TTS API crash: {e}')
    logger.error(traceback.format_exc())
    return json_error_response('Internal Server Error', status=500)

  logger.info(f'Generated {len(result.audio_base64)} base64 chars of audio '
              f'for {len(result.line_set)} lines with voice '
              f'{result.voice.identifier}')
  return json_response(result.to_dict())


@web_bp.route('/api/voices')
def list_voices() -> flask.Response:
  """Return the selectable voice presets."""
  return json_response({
    'voices': [preset.to_dict() for preset in tts_voices.all_presets()],
  })


@web_bp.route('/api/lines', methods=['POST'])
def script_lines() -> flask.Response:
  """Split a script into lines and locate the line at a playback position."""
  body = _json_body()
  text = body.get('text', '')
  if not isinstance(text, str):
    return json_error_response('Text must be a string', status=400)

  current_time = _parse_seconds(body.get('currentTime'))
  duration = _parse_seconds(body.get('duration'))
  if current_time is None or duration is None:
    return json_error_response('currentTime and duration must be numbers',
                               status=400)
  if current_time < 0 or duration < 0:
    return json_error_response(
      'currentTime and duration must not be negative', status=400)
  if math.isfinite(duration) and duration > 0 and current_time > duration:
    return json_error_response('currentTime must not exceed duration',
                               status=400)

  overflow = _parse_overflow(body.get('overflow'))
  if overflow is None:
    allowed = [option.value for option in lyric_timing.LineOverflow]
    return json_error_response(f'overflow must be one of {allowed}',
                               status=400)

  line_set = lyric_timing.split_script(text)
  playback = lyric_timing.PlaybackState(current_time=current_time,
                                        duration=duration)
  current_index = lyric_timing.current_line_for_playback(playback,
                                                         line_set,
                                                         overflow=overflow)
  return json_response({
    **line_set.to_dict(),
    'progress':
    playback.progress,
    'estimatedWordIndex':
    lyric_timing.estimate_word_index(current_time, duration,
                                     line_set.total_words),
    'currentLineIndex':
    current_index,
    'lineStatuses': [
      lyric_timing.line_status(index, current_index).value
      for index in range(len(line_set))
    ],
  })
