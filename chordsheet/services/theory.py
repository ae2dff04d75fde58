import logging
import re
from typing import List, Optional

from chordsheet.services.chart import is_likely_chord_line

logger = logging.getLogger(__name__)

# Canonical sharp-based spelling; index is the pitch class (0-11)
CHORD_NOTES = [
    "C", "C#", "D", "D#", "E", "F",
    "F#", "G", "G#", "A", "A#", "B",
]

# Flat spellings fold onto the sharp names above
NOTE_ALIASES = {
    "Db": "C#", "Eb": "D#", "Gb": "F#", "Ab": "G#", "Bb": "A#",
    "C#": "C#", "D#": "D#", "F#": "F#", "G#": "G#", "A#": "A#",
}

# A whole chord token: root + opaque quality
_CHORD_RE = re.compile(r"([A-G][#b]?)(.*)")

# Chord tokens embedded in a line of text. A trailing '#' belongs to the
# token, so the closing boundary rejects both word characters and '#'.
_LINE_CHORD_RE = re.compile(
    r"\b[A-G][#b]?"
    r"(?:m|maj|min|aug|dim|sus|add|maj7|m7|7|9|11|13|6|5)?"
    r"(?:/[A-G][#b]?)?"
    r"(?![\w#])",
    re.ASCII,
)


def resolve_root(name: str) -> Optional[int]:
    """Return the pitch class (0-11) for a root like 'C', 'F#', 'Bb', or None."""
    normalized = NOTE_ALIASES.get(name, name)
    if normalized not in CHORD_NOTES:
        return None
    return CHORD_NOTES.index(normalized)


def resolve_key(key: Optional[str]) -> Optional[int]:
    """Return the pitch class of a key name; a trailing 'm' (minor) is ignored."""
    if not key:
        return None
    root = key[:-1] if key.endswith("m") else key
    return resolve_root(root)


def transpose_chord(chord: str, semitones: int) -> str:
    """Transpose a chord symbol by a semitone interval.

    Only the root moves; the quality (including any slash bass) is kept
    verbatim. Unparseable chords and unknown roots come back unchanged.
    """
    if not chord or semitones == 0:
        return chord

    m = _CHORD_RE.fullmatch(chord)
    if not m:
        return chord

    root, quality = m.groups()
    root_pc = resolve_root(root)
    if root_pc is None:
        return chord

    return CHORD_NOTES[(root_pc + semitones) % 12] + quality


def get_semitones_between_keys(from_key: str, to_key: str) -> int:
    """Return the upward semitone distance (0-11) from one key to another.

    Minor keys are treated like their tonic ('Am' -> 'A'). Unknown keys give 0.
    """
    from_pc = resolve_key(from_key)
    to_pc = resolve_key(to_key)
    if from_pc is None or to_pc is None:
        logger.debug("Unresolved key pair %r -> %r, no transposition", from_key, to_key)
        return 0
    return (to_pc - from_pc + 12) % 12


def transpose_chord_between_keys(chord: str, from_key: str, to_key: str) -> str:
    return transpose_chord(chord, get_semitones_between_keys(from_key, to_key))


def transpose_chord_line(line: str, from_key: str, to_key: str) -> str:
    """Transpose every chord token in a line, leaving spacing and lyrics intact."""
    if not line or not from_key or not to_key or from_key == to_key:
        return line

    semitones = get_semitones_between_keys(from_key, to_key)
    return _LINE_CHORD_RE.sub(lambda m: transpose_chord(m.group(0), semitones), line)


def get_musical_keys() -> List[str]:
    """Major keys followed by minor keys, in chromatic order from C."""
    return list(CHORD_NOTES) + [f"{note}m" for note in CHORD_NOTES]


def resolve_display_key(
    default_key: Optional[str],
    service_key: Optional[str] = None,
    fallback: str = "C",
) -> str:
    """Pick the key a chart is shown in: service key, then song key, then fallback."""
    return service_key or default_key or fallback


def transpose_chart(
    content: str,
    from_key: str,
    to_key: str,
    only_chord_lines: bool = False,
) -> str:
    """Transpose a whole chart line by line.

    With only_chord_lines, lines that don't look like chord rows are kept
    as-is so lyric words like "A" survive.
    """
    if not content:
        return content

    lines = content.split("\n")
    out = []
    for line in lines:
        if only_chord_lines and not is_likely_chord_line(line):
            out.append(line)
        else:
            out.append(transpose_chord_line(line, from_key, to_key))
    return "\n".join(out)
