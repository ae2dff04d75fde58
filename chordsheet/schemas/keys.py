from typing import List

from pydantic import BaseModel


class KeyListResponse(BaseModel):
    keys: List[str]


class KeyIntervalResponse(BaseModel):
    from_key: str
    to_key: str
    interval_semitones: int
