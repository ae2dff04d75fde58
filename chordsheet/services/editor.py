"""Text helpers behind the chord editor's quick-insert buttons."""

COMMON_CHORDS = [
    "C", "G", "D", "A", "E", "F", "Am", "Em", "Dm",
    "G7", "C7", "D7", "Cmaj7", "Fmaj7", "Gsus4",
]

SECTION_NAMES = ["Verse", "Chorus", "Bridge", "Intro", "Outro", "Pre-Chorus"]

EXAMPLE_CHART = """[Verse 1]
C        G        Am       F
Here are some example chords above lyrics
C             G              Am  F
Words should be aligned with the chords above

[Chorus]
F         G       C
This is how a chorus might look
F         G       Am      G
With more chords and lyrics here

[Bridge]
Am   G   F   C
Simple progression
"""

# Chords are followed by two spaces so the next one still reads as a chord row
_CHORD_GAP = "  "


def _insert_at(value: str, cursor: int, text: str) -> str:
    cursor = max(0, min(cursor, len(value)))
    return value[:cursor] + text + value[cursor:]


def insert_chord(value: str, cursor: int, chord: str) -> str:
    if not value:
        return chord + _CHORD_GAP
    return _insert_at(value, cursor, chord + _CHORD_GAP)


def insert_section(value: str, cursor: int, section: str) -> str:
    section_text = f"\n[{section}]\n"
    if not value:
        return section_text
    return _insert_at(value, cursor, section_text)
