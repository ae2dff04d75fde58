import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from chordsheet.config import settings
from chordsheet.schemas.chart import ChartRenderRequest, ChartRenderResponse
from chordsheet.schemas.keys import KeyIntervalResponse, KeyListResponse
from chordsheet.schemas.transpose import (
    ChartTransposeRequest,
    ChartTransposeResponse,
    ChordTransposeRequest,
    ChordTransposeResponse,
)
from chordsheet.services.chart import parse_chart
from chordsheet.services.theory import (
    get_musical_keys,
    get_semitones_between_keys,
    resolve_display_key,
    resolve_key,
    transpose_chart,
    transpose_chord,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _validate_key(field: str, key: Optional[str]) -> None:
    if not settings.strict_keys or key is None:
        return
    if resolve_key(key) is None:
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {key!r}")


def _validate_content(content: str) -> None:
    if len(content) > settings.max_chart_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Chart content exceeds {settings.max_chart_chars} characters",
        )


@router.get("/keys")
def list_keys() -> dict:
    return KeyListResponse(keys=get_musical_keys()).model_dump()


@router.get("/keys/interval")
def key_interval(from_key: str, to_key: str) -> dict:
    _validate_key("from_key", from_key)
    _validate_key("to_key", to_key)
    return KeyIntervalResponse(
        from_key=from_key,
        to_key=to_key,
        interval_semitones=get_semitones_between_keys(from_key, to_key),
    ).model_dump()


@router.post("/transpose/chord")
def transpose_single_chord(req: ChordTransposeRequest) -> dict:
    if req.semitones is not None:
        interval = req.semitones
    else:
        _validate_key("from_key", req.from_key)
        _validate_key("to_key", req.to_key)
        interval = get_semitones_between_keys(req.from_key, req.to_key)

    return ChordTransposeResponse(
        chord=req.chord,
        transposed=transpose_chord(req.chord, interval),
        interval_semitones=interval,
    ).model_dump()


@router.post("/transpose/chart")
def transpose_whole_chart(req: ChartTransposeRequest) -> dict:
    _validate_content(req.content)
    _validate_key("from_key", req.from_key)
    _validate_key("to_key", req.to_key)

    transposed = transpose_chart(
        req.content, req.from_key, req.to_key, only_chord_lines=req.only_chord_lines
    )
    interval = get_semitones_between_keys(req.from_key, req.to_key)
    logger.info(
        "Transposed chart %s -> %s (%d semitones, %d lines)",
        req.from_key, req.to_key, interval, req.content.count("\n") + 1,
    )

    return ChartTransposeResponse(
        content=transposed,
        from_key=req.from_key,
        to_key=req.to_key,
        interval_semitones=interval,
    ).model_dump()


@router.post("/charts/render")
def render_chart(req: ChartRenderRequest) -> dict:
    _validate_content(req.content)

    original_key = req.default_key or settings.default_key
    key = req.target_key or resolve_display_key(
        req.default_key, req.service_key, fallback=settings.default_key
    )
    _validate_key("default_key", req.default_key)
    _validate_key("service_key", req.service_key)
    _validate_key("target_key", req.target_key)

    # Returning to the original key shows the chart exactly as stored
    if key == original_key:
        content = req.content
    else:
        content = transpose_chart(req.content, original_key, key)

    lines = parse_chart(content)
    logger.info(
        "Rendered chart in %s (original %s): %d records", key, original_key, len(lines)
    )

    return ChartRenderResponse(
        key=key,
        original_key=original_key,
        interval_semitones=get_semitones_between_keys(original_key, key),
        content=content,
        lines=lines,
    ).model_dump()
