"""Tests for the tts_relay module."""

import base64
from unittest.mock import MagicMock

import pytest

from common import config
from services import tts_client, tts_relay
from services.tts_voices import VoicePreset


def _relay(api_key: str | None = "test-key", **kwargs):
  fake_client = MagicMock(spec=tts_client.ElevenlabsTtsClient)
  fake_client.synthesize.return_value = b"mp3-bytes"
  factory = MagicMock(return_value=fake_client)
  relay = tts_relay.TtsRelay(
    config.RelayConfig(api_key=api_key, **kwargs),
    client_factory=factory,
  )
  return relay, factory, fake_client


def test_generate_returns_base64_audio_and_lines():
  relay, factory, fake_client = _relay(stability=0.3, similarity_boost=0.8)

  result = relay.generate("Hello world\n\nGoodbye now", voice_id="female1")

  assert base64.b64decode(result.audio_base64) == b"mp3-bytes"
  assert result.voice is VoicePreset.FEMALE1
  assert result.line_set.texts == ["Hello world", "Goodbye now"]
  factory.assert_called_once_with(relay.config)
  fake_client.synthesize.assert_called_once_with(
    text="Hello world\n\nGoodbye now",
    voice=VoicePreset.FEMALE1,
    stability=0.3,
    similarity_boost=0.8,
  )


def test_generate_to_dict_shape():
  relay, _, _ = _relay()

  payload = relay.generate("Hello world").to_dict()

  assert payload == {
    "audio": base64.b64encode(b"mp3-bytes").decode("ascii"),
    "voice": "default",
    "lines": [{
      "text": "Hello world",
      "wordCount": 2
    }],
    "totalWords": 2,
  }


@pytest.mark.parametrize("voice_id", [None, "", "robot"])
def test_generate_falls_back_to_default_voice(voice_id):
  relay, _, fake_client = _relay()

  result = relay.generate("Hi", voice_id=voice_id)

  assert result.voice is VoicePreset.DEFAULT
  assert fake_client.synthesize.call_args.kwargs[
    "voice"] is VoicePreset.DEFAULT


@pytest.mark.parametrize("text", ["", "   \n\t", None, 42, ["hi"]])
def test_generate_rejects_invalid_text_before_any_call(text):
  relay, factory, fake_client = _relay()

  with pytest.raises(tts_relay.InvalidTextError):
    relay.generate(text)

  factory.assert_not_called()
  fake_client.synthesize.assert_not_called()


def test_generate_without_api_key_fails_before_any_call():
  relay, factory, fake_client = _relay(api_key=None)

  with pytest.raises(tts_relay.RelayConfigurationError) as exc_info:
    relay.generate("Hello")

  assert "ELEVENLABS_API_KEY" not in str(exc_info.value)
  factory.assert_not_called()
  fake_client.synthesize.assert_not_called()


def test_generate_wraps_provider_errors():
  relay, _, fake_client = _relay()
  fake_client.synthesize.side_effect = tts_client.TtsProviderError(
    "ElevenLabs TTS failed", status_code=500)

  with pytest.raises(tts_relay.RelayProviderError,
                     match="Text-to-speech generation failed"):
    relay.generate("Hello")


def test_generate_reuses_client_between_requests():
  relay, factory, fake_client = _relay()

  relay.generate("One")
  relay.generate("Two")

  factory.assert_called_once()
  assert fake_client.synthesize.call_count == 2
