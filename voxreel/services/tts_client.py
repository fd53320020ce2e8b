"""ElevenLabs text-to-speech client.

A thin wrapper over the ElevenLabs SDK: one blocking request per call, no
retries. Provider failures are logged with their detail and re-raised as
module errors carrying only a generic message.
"""
from __future__ import annotations

import time

import httpx
from common import config
from elevenlabs.client import ElevenLabs
from elevenlabs.core.api_error import ApiError
from elevenlabs.types.voice_settings import VoiceSettings
from firebase_functions import logger
from services.tts_voices import VoicePreset


class Error(Exception):
  """Base class for exceptions in this module."""


class MissingApiKeyError(Error):
  """Raised when the client is built without a provider credential."""


class TtsProviderError(Error):
  """Raised when the provider rejects or fails a synthesis request."""

  def __init__(self, message: str, *, status_code: int | None = None):
    super().__init__(message)
    self.status_code: int | None = status_code


class ElevenlabsTtsClient:
  """Synthesizes speech with the ElevenLabs text-to-speech endpoint."""

  def __init__(
    self,
    *,
    api_key: str,
    model_id: str = config.ELEVENLABS_DEFAULT_MODEL_ID,
    output_format: str = config.ELEVENLABS_OUTPUT_FORMAT,
    timeout_sec: int = config.ELEVENLABS_TIMEOUT_SEC,
  ):
    if not (api_key or "").strip():
      raise MissingApiKeyError("ElevenLabs API key is not configured")
    self._api_key: str = api_key
    self.model_id: str = model_id
    self.output_format: str = output_format
    self.timeout_sec: int = timeout_sec

    self._model_client: ElevenLabs | None = None

  @classmethod
  def from_config(cls, relay_config: config.RelayConfig) -> ElevenlabsTtsClient:
    """Build a client from relay settings."""
    return cls(
      api_key=relay_config.api_key or "",
      model_id=relay_config.model_id,
      output_format=relay_config.output_format,
      timeout_sec=relay_config.timeout_sec,
    )

  @property
  def model_client(self) -> ElevenLabs:
    """Get the underlying API client (lazily constructed)."""

    if self._model_client is None:
      self._model_client = ElevenLabs(
        api_key=self._api_key,
        timeout=float(self.timeout_sec),
      )
    return self._model_client

  def synthesize(
    self,
    *,
    text: str,
    voice: VoicePreset,
    stability: float = config.DEFAULT_STABILITY,
    similarity_boost: float = config.DEFAULT_SIMILARITY_BOOST,
  ) -> bytes:
    """Convert `text` to speech and return the encoded audio bytes."""
    start_time = time.perf_counter()
    logger.info(f"{self.model_id} start: voice={voice.identifier}, "
                f"characters={len(text)}")

    try:
      # The SDK streams the body lazily, so errors can surface mid-iteration.
      chunks = self.model_client.text_to_speech.convert(
        voice.voice_id,
        text=text,
        model_id=self.model_id,
        output_format=self.output_format,
        voice_settings=VoiceSettings(
          stability=stability,
          similarity_boost=similarity_boost,
        ),
      )
      audio_bytes = b"".join(chunks)
    except ApiError as e:
      logger.error(f"ElevenLabs error (status {e.status_code}): {e.body}")
      raise TtsProviderError("ElevenLabs TTS failed",
                             status_code=e.status_code) from e
    except httpx.HTTPError as e:
      logger.error(f"ElevenLabs request failed: {e!r}")
      raise TtsProviderError("ElevenLabs request failed") from e

    if not audio_bytes:
      logger.error("ElevenLabs returned an empty audio body")
      raise TtsProviderError("ElevenLabs returned no audio")

    elapsed_sec = time.perf_counter() - start_time
    logger.info(f"{self.model_id} done: voice={voice.identifier}, "
                f"bytes={len(audio_bytes)}, elapsed={elapsed_sec:.2f}s")
    return audio_bytes
