"""Relay a script to the TTS provider and package the audio for the browser.

The relay validates the request, resolves the voice preset, calls the
provider once and returns base64 audio together with the script's line
breakdown, which the browser uses to highlight lines during playback.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Callable

from common import config, lyric_timing
from firebase_functions import logger
from services import tts_client
from services.tts_voices import VoicePreset


class Error(Exception):
  """Base class for exceptions in this module."""


class InvalidTextError(Error):
  """The request did not include usable text."""


class RelayConfigurationError(Error):
  """The relay is missing configuration it needs (e.g. the API key)."""


class RelayProviderError(Error):
  """The TTS provider failed the request."""


@dataclass(frozen=True, kw_only=True)
class RelayResult:
  """Audio generated for one script."""

  audio_base64: str
  voice: VoicePreset
  line_set: lyric_timing.LineSet

  def to_dict(self) -> dict[str, object]:
    """Serialize for the JSON API."""
    return {
      "audio": self.audio_base64,
      "voice": self.voice.identifier,
      **self.line_set.to_dict(),
    }


ClientFactory = Callable[[config.RelayConfig], tts_client.ElevenlabsTtsClient]


class TtsRelay:
  """Forwards text to ElevenLabs using an explicitly supplied config."""

  def __init__(
    self,
    relay_config: config.RelayConfig,
    *,
    client_factory: ClientFactory = tts_client.ElevenlabsTtsClient.from_config,
  ):
    self.config: config.RelayConfig = relay_config
    self._client_factory: ClientFactory = client_factory
    self._client: tts_client.ElevenlabsTtsClient | None = None

  def _get_client(self) -> tts_client.ElevenlabsTtsClient:
    if not self.config.has_api_key:
      logger.error(f"{config.ELEVENLABS_API_KEY_ENV} missing")
      raise RelayConfigurationError("TTS provider is not configured")
    if self._client is None:
      self._client = self._client_factory(self.config)
    return self._client

  def generate(self, text: object, voice_id: str | None = None) -> RelayResult:
    """Synthesize `text` with the selected voice.

    Raises:
      InvalidTextError: `text` is not a string or is blank. Nothing is sent.
      RelayConfigurationError: no API key is configured. Nothing is sent.
      RelayProviderError: the provider call failed.
    """
    if not isinstance(text, str) or not text.strip():
      raise InvalidTextError("Text is required")

    voice = VoicePreset.from_identifier(voice_id)
    if (voice_id or "").strip() and VoicePreset.find(voice_id) is None:
      logger.warn(f"Unknown voice '{voice_id}', using '{voice.identifier}'")

    client = self._get_client()
    try:
      audio_bytes = client.synthesize(
        text=text,
        voice=voice,
        stability=self.config.stability,
        similarity_boost=self.config.similarity_boost,
      )
    except tts_client.Error as e:
      raise RelayProviderError("Text-to-speech generation failed") from e

    return RelayResult(
      audio_base64=base64.b64encode(audio_bytes).decode("ascii"),
      voice=voice,
      line_set=lyric_timing.split_script(text),
    )
