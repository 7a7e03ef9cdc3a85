# ── Note-name tables ──────────────────────────────────────────────────────────

# Sharp-preferred spelling, indexed by semitone above C.
NOTE_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
)
NUM_NOTES = len(NOTE_NAMES)

# Flat respelling of the five black keys; white keys have a single spelling.
_SHARP_TO_FLAT: dict[str, str] = {
    "C#": "Db", "D#": "Eb", "F#": "Gb", "G#": "Ab", "A#": "Bb",
}

# ── Degree-formula tables (values in tones, i.e. whole steps) ─────────────────

# Accidental symbol left after stripping digits from a degree token.
_ACCIDENTALS: dict[str, float] = {
    "":   0.0,
    "#":  +0.5,
    "b":  -0.5,
    "n":  0.0,
    "-#": +0.25,
    "+#": +0.75,
    "-b": -0.25,
    "+b": -0.75,
}
# Scale degree → main tone above the root.
_DEGREE_TONES: dict[str, float] = {
    "1": 0.0,
    "2": 1.0,
    "3": 2.0,
    "4": 2.5,
    "5": 3.5,
    "6": 4.5,
    "7": 5.5,
    "8": 6.0,
}

# ── Output ────────────────────────────────────────────────────────────────────

# One CSV column per spelling, so F# and Gb never share a column.
NOTE_COLUMNS: tuple[str, ...] = (
    "C", "C#", "Db", "D", "D#", "Eb", "E",
    "F", "F#", "Gb", "G", "G#", "Ab", "A", "A#", "Bb", "B",
)
CSV_HEADER_FIELDS: tuple[str, ...] = (
    "Scale", "Key", "Has sharps", "Has flats", "Num pitch classes",
)

# A line only carries a degree formula if it has a tab followed by degree 1.
FORMULA_MARKER = "\t1 "
VARIANT_SUFFIX = "(2)"
