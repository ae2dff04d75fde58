from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class ChordLyricPair(BaseModel):
    type: Literal["chord-lyric-pair"] = "chord-lyric-pair"
    line: int
    chords: str
    lyrics: str


class SectionHeader(BaseModel):
    type: Literal["section"] = "section"
    line: int
    content: str
    label: str


class Spacer(BaseModel):
    type: Literal["spacer"] = "spacer"
    line: int
    content: str = ""


class TextLine(BaseModel):
    type: Literal["text"] = "text"
    line: int
    content: str
    chord_line: bool = False


ChartLine = Union[ChordLyricPair, SectionHeader, Spacer, TextLine]


class ChartRenderRequest(BaseModel):
    content: str
    default_key: Optional[str] = None
    service_key: Optional[str] = None
    target_key: Optional[str] = None

    @model_validator(mode="after")
    def key_required_with_chords(self) -> "ChartRenderRequest":
        if self.content.strip() and not self.default_key:
            raise ValueError("default_key is required when providing chords")
        return self


class ChartRenderResponse(BaseModel):
    key: str
    original_key: str
    interval_semitones: int
    content: str
    lines: List[ChartLine] = Field(default_factory=list)
