from fastapi import APIRouter

from chordsheet.schemas.editor import EditorPalette, InsertRequest, InsertResponse
from chordsheet.services.editor import (
    COMMON_CHORDS,
    EXAMPLE_CHART,
    SECTION_NAMES,
    insert_chord,
    insert_section,
)

router = APIRouter(prefix="/editor")


@router.get("/palette")
def get_palette() -> dict:
    return EditorPalette(
        chords=list(COMMON_CHORDS),
        sections=list(SECTION_NAMES),
        example=EXAMPLE_CHART,
    ).model_dump()


@router.post("/insert")
def insert(req: InsertRequest) -> dict:
    if req.chord is not None:
        value = insert_chord(req.value, req.cursor, req.chord)
    else:
        value = insert_section(req.value, req.cursor, req.section)
    return InsertResponse(value=value).model_dump()
