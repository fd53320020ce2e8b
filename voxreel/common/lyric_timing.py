"""Lyric timing: map an audio playback position onto lines of a script.

The TTS provider gives us no per-word timestamps, so the current line is
estimated by assuming a uniform speaking rate: the fraction of the clip that
has elapsed is the fraction of the script's words that have been spoken.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterator


class LineOverflow(enum.Enum):
  """Which line to report once the word estimate runs past the last line."""

  FIRST_LINE = "first_line"
  LAST_LINE = "last_line"


class LineStatus(str, enum.Enum):
  """Display state of a line relative to the current line."""

  PAST = "past"
  CURRENT = "current"
  UPCOMING = "upcoming"


@dataclass(frozen=True)
class LyricLine:
  """A single non-blank line of the script."""

  text: str
  word_count: int

  def to_dict(self) -> dict[str, str | int]:
    """Serialize for the JSON API."""
    return {"text": self.text, "wordCount": self.word_count}


@dataclass(frozen=True)
class LineSet:
  """Ordered non-blank lines of a script with per-line word counts."""

  lines: tuple[LyricLine, ...] = ()

  def __len__(self) -> int:
    return len(self.lines)

  def __iter__(self) -> Iterator[LyricLine]:
    return iter(self.lines)

  def __getitem__(self, index: int) -> LyricLine:
    return self.lines[index]

  @property
  def texts(self) -> list[str]:
    """Line texts in order."""
    return [line.text for line in self.lines]

  @property
  def word_counts(self) -> list[int]:
    """Per-line word counts in order."""
    return [line.word_count for line in self.lines]

  @property
  def total_words(self) -> int:
    """Total number of words across all lines."""
    return sum(self.word_counts)

  @property
  def cumulative_word_counts(self) -> list[int]:
    """Running word totals; entry i is the word count of lines 0..i."""
    totals: list[int] = []
    running = 0
    for count in self.word_counts:
      running += count
      totals.append(running)
    return totals

  def to_dict(self) -> dict[str, object]:
    """Serialize for the JSON API."""
    return {
      "lines": [line.to_dict() for line in self.lines],
      "totalWords": self.total_words,
    }


@dataclass(frozen=True)
class PlaybackState:
  """Position and length of the active audio clip, in seconds."""

  current_time: float = 0.0
  duration: float = 0.0

  @property
  def has_duration(self) -> bool:
    """Whether the clip length is known (metadata loaded)."""
    return _is_usable_duration(self.duration)

  @property
  def progress(self) -> float:
    """Elapsed fraction of the clip in [0, 1]; 0 until the duration is known."""
    if not self.has_duration or not math.isfinite(self.current_time):
      return 0.0
    return min(max(self.current_time / self.duration, 0.0), 1.0)


def count_words(line: str) -> int:
  """Count whitespace-delimited tokens; punctuation is left attached."""
  return len(line.split())


def split_script(script: str | None) -> LineSet:
  """Split a script into its non-blank lines, in order.

  Only newlines break lines; a trailing carriage return is dropped so Windows
  line endings are handled. Other characters such as form feeds stay inside
  the line. Blank and whitespace-only lines are dropped; kept lines retain
  their original text.
  """
  if not script:
    return LineSet()
  raw_lines = (line.removesuffix("\r") for line in script.split("\n"))
  lines = tuple(
    LyricLine(text=line, word_count=count_words(line))
    for line in raw_lines if line.strip())
  return LineSet(lines=lines)


def estimate_word_index(
  current_time: float,
  duration: float,
  total_words: int,
) -> int:
  """Estimate how many words have been spoken at `current_time`."""
  if not _is_usable_duration(duration) or not math.isfinite(current_time):
    return 0
  estimate = (current_time / duration) * total_words
  # Extreme ratios overflow to inf, or to nan when there are no words.
  if not math.isfinite(estimate):
    return 0
  return math.floor(estimate)


def current_line_index(
  current_time: float,
  duration: float,
  line_set: LineSet,
  *,
  overflow: LineOverflow = LineOverflow.FIRST_LINE,
) -> int:
  """Return the index of the line estimated to be narrated at `current_time`.

  The current line is the first line whose cumulative word count exceeds the
  estimated word index. When no line does (the estimate has reached the total
  word count, as happens at the very end of the clip) the `overflow` policy
  decides: line 0 for FIRST_LINE, the final line for LAST_LINE.
  """
  word_index = estimate_word_index(current_time, duration,
                                   line_set.total_words)
  for index, cumulative in enumerate(line_set.cumulative_word_counts):
    if word_index < cumulative:
      return index

  if overflow is LineOverflow.LAST_LINE and len(line_set) > 0:
    return len(line_set) - 1
  return 0


def current_line_for_playback(
  playback: PlaybackState,
  line_set: LineSet,
  *,
  overflow: LineOverflow = LineOverflow.FIRST_LINE,
) -> int:
  """`current_line_index` for a PlaybackState."""
  return current_line_index(
    playback.current_time,
    playback.duration,
    line_set,
    overflow=overflow,
  )


def line_status(index: int, current_index: int) -> LineStatus:
  """Classify a line for highlighting."""
  if index == current_index:
    return LineStatus.CURRENT
  if index < current_index:
    return LineStatus.PAST
  return LineStatus.UPCOMING


def scroll_target(
  line_top: float,
  line_height: float,
  container_height: float,
) -> float:
  """Scroll offset that centres a line inside its scroll container.

  `line_top` is the line's offset from the top of the scrollable content.
  `player.js` applies the same formula in the browser.
  """
  return max(line_top - (container_height / 2) + (line_height / 2), 0.0)


def format_clock(seconds: float) -> str:
  """Format seconds as m:ss for the player clock."""
  if not math.isfinite(seconds) or seconds < 0:
    seconds = 0.0
  whole = int(seconds)
  return f"{whole // 60}:{whole % 60:02d}"


class LyricScroller:
  """Tracks the highlighted line and decides when to scroll.

  Scrolling only ever moves forward: a line change triggers a scroll when the
  new index is greater than the previous one. Backwards jumps (seeking back,
  or the end-of-clip fallback to line 0) do not scroll but are still
  recorded, so a replay scrolls again from the lower index.

  This is the reference copy of the rule `player.js` applies in the browser.
  """

  def __init__(self) -> None:
    self._last_index = 0

  @property
  def last_index(self) -> int:
    """Index of the previously seen line."""
    return self._last_index

  def advance(self, index: int) -> bool:
    """Record `index`; return True if the display should scroll to it."""
    should_scroll = index > self._last_index
    self._last_index = index
    return should_scroll

  def reset(self) -> None:
    """Start over for a newly loaded script/audio pair."""
    self._last_index = 0


def _is_usable_duration(duration: float) -> bool:
  return math.isfinite(duration) and duration > 0
