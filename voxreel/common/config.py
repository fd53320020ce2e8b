"""Global configuration constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

# ElevenLabs text-to-speech
ELEVENLABS_API_KEY_ENV = "ELEVENLABS_API_KEY"
ELEVENLABS_MODEL_ID_ENV = "ELEVENLABS_MODEL_ID"
ELEVENLABS_DEFAULT_MODEL_ID = "eleven_monolingual_v1"
ELEVENLABS_OUTPUT_FORMAT = "mp3_44100_128"
ELEVENLABS_TIMEOUT_SEC = 60

# Voice tuning sent with every synthesis request
DEFAULT_STABILITY = 0.5
DEFAULT_SIMILARITY_BOOST = 0.5

# Web layer
MAX_REQUEST_BYTES = 4 * 1024 * 1024  # 4 MB
DOWNLOAD_FILENAME = "voiceover.mp3"
AUDIO_MIME_TYPE = "audio/mpeg"

PROD_ORIGINS = frozenset({"https://voxreel.app"})
EMULATOR_ORIGINS = frozenset({
  "http://127.0.0.1:5000",
  "http://localhost:5000",
  "http://127.0.0.1:3000",
  "http://localhost:3000",
})


@dataclass(frozen=True, kw_only=True)
class RelayConfig:
  """Settings for the TTS relay, passed in when the relay is constructed."""

  api_key: str | None = field(default=None, repr=False)
  model_id: str = ELEVENLABS_DEFAULT_MODEL_ID
  stability: float = DEFAULT_STABILITY
  similarity_boost: float = DEFAULT_SIMILARITY_BOOST
  output_format: str = ELEVENLABS_OUTPUT_FORMAT
  timeout_sec: int = ELEVENLABS_TIMEOUT_SEC

  @property
  def has_api_key(self) -> bool:
    """Whether a provider credential is configured."""
    return bool((self.api_key or "").strip())

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> RelayConfig:
    """Build a RelayConfig from environment variables.

    A missing API key is not an error here; the relay reports it when a
    synthesis request actually needs it.
    """
    environ = os.environ if environ is None else environ
    api_key = (environ.get(ELEVENLABS_API_KEY_ENV) or "").strip() or None
    model_id = ((environ.get(ELEVENLABS_MODEL_ID_ENV) or "").strip()
                or ELEVENLABS_DEFAULT_MODEL_ID)
    return cls(api_key=api_key, model_id=model_id)
