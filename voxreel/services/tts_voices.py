"""ElevenLabs voice presets.

Presets are addressed by a short identifier (e.g. "male1") from the UI and map
to the provider's voice ID.
"""

from __future__ import annotations

import enum


class VoicePreset(enum.Enum):
  """Selectable voices with their ElevenLabs attributes."""

  def __init__(
    self,
    identifier: str,
    voice_id: str,
    display_name: str,
    description: str,
  ):
    self._identifier = identifier
    self._voice_id = voice_id
    self._display_name = display_name
    self._description = description

  @property
  def identifier(self) -> str:
    """Get the short identifier used by the UI."""

    return self._identifier

  @property
  def voice_id(self) -> str:
    """Get the ElevenLabs voice ID."""

    return self._voice_id

  @property
  def display_name(self) -> str:
    """Get the human-readable voice name."""

    return self._display_name

  @property
  def description(self) -> str:
    """Get a short description of the voice."""

    return self._description

  @property
  def is_default(self) -> bool:
    """Whether this is the preset used when no valid voice is selected."""

    return self is DEFAULT_VOICE

  def to_dict(self) -> dict[str, str | bool]:
    """Serialize for the voices API."""

    return {
      "id": self.identifier,
      "name": self.display_name,
      "description": self.description,
      "default": self.is_default,
    }

  @classmethod
  def from_identifier(cls, identifier: str | None) -> "VoicePreset":
    """Resolve a preset from its identifier, falling back to the default.

    Accepts the short identifier ("male1"), the enum member name ("MALE1") or
    the ElevenLabs voice ID. Missing or unrecognized values resolve to the
    default preset.
    """

    return cls.find(identifier) or DEFAULT_VOICE

  @classmethod
  def find(cls, identifier: str | None) -> "VoicePreset | None":
    """Look up a preset by identifier, enum name or voice ID."""

    normalized = (identifier or "").strip()
    if not normalized:
      return None

    for preset in cls:
      if normalized in (preset.identifier, preset.name, preset.voice_id):
        return preset
    return None

  DEFAULT = ("default", "21m00Tcm4TlvDq8ikWAM", "Rachel",
             "Clear and professional female voice")
  MALE1 = ("male1", "AZnzlk1XvdvUeBnXmlld", "Domi", "Deep male voice")
  FEMALE1 = ("female1", "EXAVITQu4vr4xnSDxMaL", "Bella",
             "Energetic female voice")


DEFAULT_VOICE = VoicePreset.DEFAULT


def all_presets() -> list[VoicePreset]:
  """Return every preset, default first."""
  return sorted(VoicePreset, key=lambda preset: not preset.is_default)
