"""Chord-chart line classification.

Charts are plain text with chord rows typed above lyric rows and aligned
with spaces. A chord row is recognised heuristically: it must contain at
least one run of two or more whitespace characters, and at least half of
the chunks between those runs must start with a chord symbol.
"""
import logging
import re
from typing import List, NamedTuple

from chordsheet.schemas.chart import (
    ChartLine,
    ChordLyricPair,
    SectionHeader,
    Spacer,
    TextLine,
)

logger = logging.getLogger(__name__)

CHORD_LINE_THRESHOLD = 0.5

_SPACING_RE = re.compile(r"\s{2,}")

# Prefix test only: a chunk counts when it begins with a chord symbol
_CHUNK_CHORD_RE = re.compile(
    r"[A-G][#b]?(?:m|maj|min|aug|dim|sus|add|2|4|5|6|7|9|11|13|-|\+|/)*"
)


class ChordLineScore(NamedTuple):
    is_chord_line: bool
    ratio: float


def score_chord_line(line: str) -> ChordLineScore:
    """Score how chord-like a line is.

    ratio is the share of whitespace-separated chunks that start with a
    chord symbol; the line qualifies when that share reaches the threshold.
    """
    if not line or not line.strip():
        return ChordLineScore(False, 0.0)

    if not _SPACING_RE.search(line):
        return ChordLineScore(False, 0.0)

    chunks = [c.strip() for c in _SPACING_RE.split(line) if c.strip()]
    if not chunks:
        return ChordLineScore(False, 0.0)

    matches = sum(1 for c in chunks if _CHUNK_CHORD_RE.match(c))
    ratio = matches / len(chunks)
    return ChordLineScore(ratio >= CHORD_LINE_THRESHOLD, ratio)


def is_likely_chord_line(line: str) -> bool:
    return score_chord_line(line).is_chord_line


def is_section_header(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("[") and stripped.endswith("]")


def is_spacer(line: str) -> bool:
    return not line.strip()


def _is_lyric_line(line: str) -> bool:
    return not (is_spacer(line) or is_section_header(line) or is_likely_chord_line(line))


def _single_line_record(index: int, line: str, chord_line: bool) -> ChartLine:
    if is_section_header(line):
        return SectionHeader(line=index, content=line, label=line.strip()[1:-1].strip())
    if is_spacer(line):
        return Spacer(line=index, content=line)
    return TextLine(line=index, content=line, chord_line=chord_line)


def parse_chart(content: str) -> List[ChartLine]:
    """Turn chart text into display records.

    A chord row directly above a lyric row becomes one ChordLyricPair; every
    other line is emitted on its own as a section header, spacer or text.
    """
    if not content:
        return []

    lines = content.split("\n")
    records: List[ChartLine] = []

    i = 0
    while i < len(lines):
        current = lines[i]
        chord_line = is_likely_chord_line(current)

        if chord_line and i + 1 < len(lines) and _is_lyric_line(lines[i + 1]):
            records.append(ChordLyricPair(line=i, chords=current, lyrics=lines[i + 1]))
            i += 2
            continue

        records.append(_single_line_record(i, current, chord_line))
        i += 1

    logger.debug("Parsed %d lines into %d records", len(lines), len(records))
    return records
