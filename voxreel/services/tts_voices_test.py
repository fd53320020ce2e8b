"""Tests for the tts_voices module."""

import pytest

from services import tts_voices
from services.tts_voices import VoicePreset


@pytest.mark.parametrize("identifier, expected", [
  ("default", VoicePreset.DEFAULT),
  ("male1", VoicePreset.MALE1),
  (" female1 ", VoicePreset.FEMALE1),
  ("MALE1", VoicePreset.MALE1),
  ("EXAVITQu4vr4xnSDxMaL", VoicePreset.FEMALE1),
])
def test_from_identifier_resolves_known_presets(identifier, expected):
  assert VoicePreset.from_identifier(identifier) is expected


@pytest.mark.parametrize("identifier", [None, "", "   ", "robot", "Male1"])
def test_from_identifier_falls_back_to_default(identifier):
  assert VoicePreset.from_identifier(identifier) is tts_voices.DEFAULT_VOICE


def test_exactly_one_default_preset():
  defaults = [preset for preset in VoicePreset if preset.is_default]

  assert defaults == [VoicePreset.DEFAULT]


def test_default_preset_is_rachel():
  assert VoicePreset.DEFAULT.voice_id == "21m00Tcm4TlvDq8ikWAM"
  assert VoicePreset.DEFAULT.display_name == "Rachel"


def test_all_presets_lists_default_first():
  presets = tts_voices.all_presets()

  assert presets[0] is VoicePreset.DEFAULT
  assert set(presets) == set(VoicePreset)


def test_to_dict():
  assert VoicePreset.MALE1.to_dict() == {
    "id": "male1",
    "name": "Domi",
    "description": "Deep male voice",
    "default": False,
  }


def test_find_returns_none_for_unknown_identifier():
  assert VoicePreset.find("robot") is None
  assert VoicePreset.find(None) is None
  assert VoicePreset.find("female1") is VoicePreset.FEMALE1
