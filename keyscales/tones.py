"""
Degree tokens → tone offsets → note names.

A tone is a whole step, so one semitone is 0.5 and an octave is 6.0.
Quarter-tone accidentals (-#, +b, ...) give offsets in steps of 0.25; these
resolve to the semitone at or below them.
"""
import math

import numpy as np

from .constants import (
    NOTE_NAMES,
    NUM_NOTES,
    _ACCIDENTALS,
    _DEGREE_TONES,
    _SHARP_TO_FLAT,
)
from .errors import UnrecognizedAccidentalError, UnrecognizedDegreeError


def mod(token: str) -> float:
    """Accidental adjustment of a degree token, e.g. "#4" → +0.5."""
    symbol = "".join(ch for ch in token if not ch.isdigit())
    try:
        return _ACCIDENTALS[symbol]
    except KeyError:
        raise UnrecognizedAccidentalError(symbol, token) from None


def tone(token: str) -> float:
    """Main tone above the root, ignoring accidentals. "#2" → 1.0."""
    digits = "".join(ch for ch in token if ch.isdigit())
    try:
        return _DEGREE_TONES[digits]
    except KeyError:
        raise UnrecognizedDegreeError(token) from None


def degree_to_tone(formula: str) -> list[float]:
    """Convert a formula such as "1 2 b3 4 5 6 7" into its tone offsets."""
    # Trailing separators are ignored; any other empty token is an error.
    return [tone(tok) + mod(tok) for tok in formula.rstrip(" ").split(" ")]


def note(tone_offset: float) -> str:
    """Sharp-spelled pitch class of a tone offset above C, any octave."""
    return NOTE_NAMES[math.floor(tone_offset * 2) % NUM_NOTES]


def degree_to_note(formula: str) -> list[str]:
    """Notes of a formula with C as the root."""
    return [note(t) for t in degree_to_tone(formula)]


def note_using_flats(name: str) -> str:
    return _SHARP_TO_FLAT.get(name, name)


def notes_using_flats(names):
    return [note_using_flats(n) for n in names]


# ── Vectorised helpers used by the keyed-scale generator ─────────────────────

def transpose(tones, tonic_tone_offset: float) -> np.ndarray:
    """Shift every tone by the tonic's offset."""
    return np.asarray(tones, dtype=np.float64) + tonic_tone_offset


def notes_for_tones(tones) -> list[str]:
    """Same as [note(t) for t in tones], computed as one numpy pass."""
    semitones = np.floor(np.asarray(tones, dtype=np.float64) * 2).astype(np.int64)
    return [NOTE_NAMES[pc] for pc in np.mod(semitones, NUM_NOTES)]


def tonic_offset(position: int) -> float:
    """Tone offset of chromatic position 0-11 (C=0, C#=1, ...)."""
    return position / 2


def tonic_name(position: int) -> str:
    return NOTE_NAMES[position % NUM_NOTES]
