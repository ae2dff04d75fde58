from typing import Optional

from pydantic import BaseModel, model_validator


class ChordTransposeRequest(BaseModel):
    chord: str
    semitones: Optional[int] = None
    from_key: Optional[str] = None
    to_key: Optional[str] = None

    @model_validator(mode="after")
    def interval_or_keys(self) -> "ChordTransposeRequest":
        has_keys = self.from_key is not None and self.to_key is not None
        if self.semitones is None and not has_keys:
            raise ValueError("provide 'semitones' or both 'from_key' and 'to_key'")
        if self.semitones is not None and (self.from_key or self.to_key):
            raise ValueError("'semitones' cannot be combined with 'from_key'/'to_key'")
        return self


class ChordTransposeResponse(BaseModel):
    chord: str
    transposed: str
    interval_semitones: int


class ChartTransposeRequest(BaseModel):
    content: str
    from_key: Optional[str] = None
    to_key: str
    only_chord_lines: bool = False

    @model_validator(mode="after")
    def key_required_with_chords(self) -> "ChartTransposeRequest":
        if self.content.strip() and not self.from_key:
            raise ValueError("from_key is required when providing chords")
        return self


class ChartTransposeResponse(BaseModel):
    content: str
    from_key: Optional[str] = None
    to_key: str
    interval_semitones: int
