from .constants import CSV_HEADER_FIELDS, NOTE_COLUMNS


def _bool(value: bool) -> str:
    return "true" if value else "false"


def csv_header() -> str:
    return ",".join(CSV_HEADER_FIELDS + NOTE_COLUMNS)


def csv_format(ks) -> str:
    """One CSV row; each palette column holds the note if the scale uses that exact spelling."""
    fields = [
        ks.scale,
        ks.tonic,
        _bool(ks.has_sharps),
        _bool(ks.has_flats),
        str(ks.note_count),
    ]
    fields += [n if n in ks.notes else "" for n in NOTE_COLUMNS]
    return ",".join(fields)


def _note_class(name: str) -> str:
    return ("note-" + name).replace("#", "-sharp").replace("b", "-flat").lower()


def html_format(ks) -> str:
    """
    A single <div> line, e.g.

        <div class="has-sharps note-c-sharp ...">Major in C# (7): C# D# ...</div>
    """
    classes = ""
    if ks.has_sharps:
        classes += "has-sharps "
    if ks.has_flats:
        classes += "has-flats "
    classes += " ".join(_note_class(n) for n in ks.notes)
    body = f"{ks.scale} in {ks.tonic} ({ks.note_count}): {' '.join(ks.notes)}"
    return f'<div class="{classes}">{body}</div>'


def pretty_format(ks) -> str:
    return f"{ks.scale} in {ks.tonic}: {' '.join(ks.notes)}"


FORMATTERS = {
    "html":   html_format,
    "csv":    csv_format,
    "pretty": pretty_format,
}
