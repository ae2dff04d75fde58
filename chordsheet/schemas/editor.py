from typing import List, Optional

from pydantic import BaseModel, model_validator


class EditorPalette(BaseModel):
    chords: List[str]
    sections: List[str]
    example: str


class InsertRequest(BaseModel):
    value: str = ""
    cursor: int = 0
    chord: Optional[str] = None
    section: Optional[str] = None

    @model_validator(mode="after")
    def exactly_one_insert(self) -> "InsertRequest":
        if (self.chord is None) == (self.section is None):
            raise ValueError("provide exactly one of 'chord' or 'section'")
        return self


class InsertResponse(BaseModel):
    value: str
