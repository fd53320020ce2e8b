"""Tests for the config module."""

from common import config


def test_relay_config_from_env_reads_api_key_and_model():
  relay_config = config.RelayConfig.from_env({
    "ELEVENLABS_API_KEY": " secret-key ",
    "ELEVENLABS_MODEL_ID": "eleven_turbo_v2",
  })

  assert relay_config.api_key == "secret-key"
  assert relay_config.model_id == "eleven_turbo_v2"
  assert relay_config.has_api_key is True


def test_relay_config_from_env_defaults_when_unset():
  relay_config = config.RelayConfig.from_env({})

  assert relay_config.api_key is None
  assert relay_config.has_api_key is False
  assert relay_config.model_id == config.ELEVENLABS_DEFAULT_MODEL_ID
  assert relay_config.stability == 0.5
  assert relay_config.similarity_boost == 0.5


def test_relay_config_from_env_treats_blank_key_as_missing():
  relay_config = config.RelayConfig.from_env({"ELEVENLABS_API_KEY": "   "})

  assert relay_config.api_key is None


def test_relay_config_from_env_uses_process_environment(monkeypatch):
  monkeypatch.setenv("ELEVENLABS_API_KEY", "from-process")

  assert config.RelayConfig.from_env().api_key == "from-process"


def test_relay_config_repr_hides_api_key():
  relay_config = config.RelayConfig(api_key="super-secret")

  assert "super-secret" not in repr(relay_config)
