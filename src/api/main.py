"""FastAPI app exposing the fractal tree renderer to the browser UI."""

from __future__ import annotations

import logging
from math import isfinite
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, Field

from fractree import (
    CONFIG,
    ParameterSet,
    commands_to_dicts,
    count_commands,
    export_png,
    parameters_to_dict,
    random_parameters,
    render,
    setup_logging,
)

setup_logging(CONFIG)
logger = logging.getLogger("fractree.api")

app = FastAPI(title="Fractal Tree API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _json_safe(value: object) -> object:
    # Rejected Infinity/NaN inputs are echoed back as strings.
    if isinstance(value, float) and not isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": _json_safe(jsonable_encoder(exc.errors()))})


class TreeSettingsRequest(BaseModel):
    """Settings panel fields; anything left out keeps its current value."""

    length: Optional[float] = Field(default=None, le=CONFIG.max_length, allow_inf_nan=False)
    branch_width: Optional[float] = Field(default=None, allow_inf_nan=False)
    curve: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Angle added per branching level."
    )
    curve2: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Control point offset of each branch curve."
    )
    branch_color: Optional[str] = None
    leaf_color: Optional[str] = None


CURRENT_PARAMETERS: ParameterSet = CONFIG.default_parameters


def _apply_settings(parameters: ParameterSet, request: TreeSettingsRequest) -> ParameterSet:
    changes = {
        "initial_length": request.length,
        "initial_branch_width": request.branch_width,
        "curve_offset_a": request.curve,
        "curve_offset_b": request.curve2,
        "branch_color": request.branch_color,
        "leaf_color": request.leaf_color,
    }
    return parameters.replace(**{key: value for key, value in changes.items() if value is not None})


def _check_canvas(width: int, height: int) -> None:
    if width * height > CONFIG.max_canvas_pixels:
        raise HTTPException(status_code=400, detail="Canvas too large")


def _tree_response(parameters: ParameterSet, width: int, height: int) -> dict[str, object]:
    _check_canvas(width, height)
    origin = CONFIG.origin(width, height)
    commands = list(render(origin, parameters))
    counts = count_commands(commands)
    logger.info("Rendered %d branches and %d leaves", counts.strokes, counts.leaves)
    return {
        "parameters": parameters_to_dict(parameters),
        "canvas": {"width": width, "height": height},
        "origin": list(origin),
        "counts": {"strokes": counts.strokes, "leaves": counts.leaves},
        "commands": commands_to_dicts(commands),
    }


@app.get("/")
def health() -> dict[str, str]:
    return {"status": "ok", "service": "Fractal Tree API"}


@app.get("/tree")
def get_tree(
    width: int = Query(CONFIG.canvas_width, ge=1),
    height: int = Query(CONFIG.canvas_height, ge=1),
) -> dict[str, object]:
    return _tree_response(CURRENT_PARAMETERS, width, height)


@app.post("/tree")
def update_tree(
    request: TreeSettingsRequest,
    width: int = Query(CONFIG.canvas_width, ge=1),
    height: int = Query(CONFIG.canvas_height, ge=1),
) -> dict[str, object]:
    global CURRENT_PARAMETERS
    CURRENT_PARAMETERS = _apply_settings(CURRENT_PARAMETERS, request)
    return _tree_response(CURRENT_PARAMETERS, width, height)


@app.post("/random")
def random_tree(
    width: int = Query(CONFIG.canvas_width, ge=1),
    height: int = Query(CONFIG.canvas_height, ge=1),
) -> dict[str, object]:
    global CURRENT_PARAMETERS
    CURRENT_PARAMETERS = random_parameters()
    return _tree_response(CURRENT_PARAMETERS, width, height)


@app.post("/reset")
def reset_tree(
    width: int = Query(CONFIG.canvas_width, ge=1),
    height: int = Query(CONFIG.canvas_height, ge=1),
) -> dict[str, object]:
    global CURRENT_PARAMETERS
    CURRENT_PARAMETERS = CONFIG.default_parameters
    return _tree_response(CURRENT_PARAMETERS, width, height)


@app.get("/export.png")
def export_tree(
    width: int = Query(CONFIG.canvas_width, ge=1),
    height: int = Query(CONFIG.canvas_height, ge=1),
) -> StreamingResponse:
    _check_canvas(width, height)
    png = export_png(render(CONFIG.origin(width, height), CURRENT_PARAMETERS), width, height)
    return StreamingResponse(
        iter([png]),
        media_type="image/png",
        headers={"Content-Disposition": f"attachment; filename={CONFIG.export_filename}"},
    )
