"""
A scale realised in one key, and generation over all 12 tonics.

Instances are built sharp-spelled. When a sharp instance contains a sharp,
a flat-spelled twin (same pitches) is emitted straight after it. A scale that
only needs flats in a key still comes out sharp-free, so it never gets a
sharp twin.
"""
from dataclasses import dataclass

from .constants import NUM_NOTES
from .tones import (
    note_using_flats,
    notes_for_tones,
    notes_using_flats,
    tonic_name,
    tonic_offset,
    transpose,
)


@dataclass(frozen=True)
class KeyedScale:
    scale: str
    tonic: str
    notes: tuple[str, ...]

    @property
    def has_sharps(self) -> bool:
        return "#" in self.tonic or any("#" in n for n in self.notes)

    @property
    def has_flats(self) -> bool:
        return "b" in self.tonic or any("b" in n for n in self.notes)

    @property
    def note_count(self) -> int:
        return len(self.notes)

    def flat_copy(self) -> "KeyedScale":
        """The enharmonic twin using Db/Eb/Gb/Ab/Bb instead of sharps."""
        return KeyedScale(
            self.scale,
            note_using_flats(self.tonic),
            tuple(notes_using_flats(self.notes)),
        )


def keyed_scale(scale: str, tones, position: int) -> KeyedScale:
    """Sharp-spelled instance of `scale` with tonic at chromatic `position`."""
    keyed_tones = transpose(tones, tonic_offset(position))
    return KeyedScale(scale, tonic_name(position), tuple(notes_for_tones(keyed_tones)))


def keyed_scales_for_tonic(scale: str, tones, position: int) -> list[KeyedScale]:
    ks = keyed_scale(scale, tones, position)
    if ks.has_sharps:
        return [ks, ks.flat_copy()]
    return [ks]


def generate_keyed_scales(scale_tones: dict[str, list[float]]):
    """
    Yield every KeyedScale in output order: scale name ascending, then tonic
    C..B, sharp instance before its flat twin.
    """
    for scale in sorted(scale_tones):
        tones = scale_tones[scale]
        for position in range(NUM_NOTES):
            yield from keyed_scales_for_tonic(scale, tones, position)
