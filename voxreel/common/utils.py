"""Utility functions"""

import os


def is_emulator() -> bool:
  """Returns True if the code is running in an emulator."""
  return bool(os.environ.get('FUNCTIONS_EMULATOR'))
