"""Tests for the landing page."""

from __future__ import annotations

from web.app import app


def test_index_renders_voice_picker_and_player():
  with app.test_client() as client:
    resp = client.get('/')

  assert resp.status_code == 200
  assert resp.headers['Content-Type'].startswith('text/html')
  html = resp.get_data(as_text=True)
  assert 'VoxReel' in html
  assert 'data-voice-id="default"' in html
  assert 'data-voice-id="male1"' in html
  assert 'data-voice-id="female1"' in html
  assert 'Clear and professional female voice' in html
  assert 'download="voiceover.mp3"' in html
  assert '/api/tts' in html
  assert 'js/player.js' in html


def test_index_marks_default_voice_selected():
  with app.test_client() as client:
    html = client.get('/').get_data(as_text=True)

  default_button = html.split('data-voice-id="default"')[0].rsplit(
    '<button', 1)[1]
  assert 'selected' in default_button


def test_index_serves_player_script():
  with app.test_client() as client:
    resp = client.get('/static/js/player.js')

  assert resp.status_code == 200
  assert b'currentLineIndex' in resp.data


def test_trailing_slash_redirects_to_canonical_path():
  with app.test_client() as client:
    resp = client.get('/api/voices/?source=test')

  assert resp.status_code == 308
  assert resp.headers['Location'] == '/api/voices?source=test'
