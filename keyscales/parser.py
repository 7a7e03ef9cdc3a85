"""
Read the tab-delimited scale listing and build the scale → tones table.

Input lines look like

    Major<TAB>1 2 3 4 5 6 7
    <TAB>1 2 3 4 5 6 b7

Only lines containing a tab followed by degree 1 are formula lines; headers,
blank lines and notes are skipped. A formula line with no name is another
variant of the scale above it and is named "<previous>(2)".
"""
from .constants import FORMULA_MARKER, VARIANT_SUFFIX
from .errors import MalformedRecordError
from .tones import degree_to_tone


def split_lines(text: str) -> list[str]:
    """Split on any line ending (CRLF, LF or CR)."""
    return text.splitlines()


def parse_records(text: str) -> list[tuple[str, str]]:
    """Return raw (candidate_name, formula) pairs for each formula line."""
    records = []
    for line in split_lines(text):
        if FORMULA_MARKER not in line:
            continue
        fields = line.split("\t")
        # Unreachable while FORMULA_MARKER contains a tab.
        if len(fields) < 2:
            raise MalformedRecordError(line)
        records.append((fields[0], fields[1]))
    return records


def bulk_fill(records, previous_name: str = "") -> list[tuple[str, str]]:
    """Fill in missing scale names from the record before.

    >>> bulk_fill([("Major", "1 2 3"), ("", "1 2 b3")])
    [('Major', '1 2 3'), ('Major(2)', '1 2 b3')]
    """
    filled = []
    for name, formula in records:
        name = name if name else previous_name + VARIANT_SUFFIX
        filled.append((name, formula))
        previous_name = name
    return filled


def parse_degree_records(text: str) -> list[tuple[str, str]]:
    return bulk_fill(parse_records(text))


def build_scale_table(records) -> dict[str, str]:
    """Scale name → degree formula. A repeated name keeps its last formula."""
    return {name: formula for name, formula in records}


def build_scale_tones(table: dict[str, str]) -> dict[str, list[float]]:
    """Scale name → tone offsets, with keys in ascending name order."""
    return {name: degree_to_tone(table[name]) for name in sorted(table)}


def read_scale_file(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def load_scale_tones(path: str) -> dict[str, list[float]]:
    """Read a scale listing from disk and return its scale → tones table."""
    text = read_scale_file(path)
    return build_scale_tones(build_scale_table(parse_degree_records(text)))
