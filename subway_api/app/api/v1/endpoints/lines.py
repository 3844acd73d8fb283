"""
Line endpoints for API v1.

Status codes follow the contract existing clients rely on, which is
not symmetric across operations:

* ``POST /lines`` with a name already in use answers 400.
* ``GET /lines/{id}`` for an unknown id answers 400, not 404.
* ``PUT`` and ``DELETE /lines/{id}`` for an unknown id answer 204.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from subway_api.app.core.config import settings
from subway_api.app.core.exceptions import (
    DuplicateLineNameError,
    InvalidSectionError,
    LineNotFoundError,
    StationNotFoundError,
)
from subway_api.app.schemas.line import LineCreate, LineRead, LineUpdate
from subway_api.app.services.line_service import LineService

router = APIRouter(prefix="/lines", tags=["lines"])


@router.post("", response_model=LineRead, status_code=status.HTTP_201_CREATED)
async def create_line(line_in: LineCreate, response: Response) -> LineRead:
    """Create a line, optionally with its first section.

    The ``Location`` header points at the new line.
    """
    try:
        line = await LineService.create_line(line_in)
    except (DuplicateLineNameError, StationNotFoundError, InvalidSectionError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    response.headers["Location"] = f"{settings.api_prefix}/lines/{line.id}"
    return line


@router.get("", response_model=List[LineRead])
async def list_lines() -> List[LineRead]:
    return await LineService.list_lines()


@router.get("/{line_id}", response_model=LineRead)
async def get_line(line_id: int) -> LineRead:
    try:
        return await LineService.get_line(line_id)
    except LineNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.put("/{line_id}", response_model=LineRead)
async def update_line(line_id: int, line_in: LineUpdate):
    """Rename/recolor a line.  Answers 204 with no body for an unknown id."""
    try:
        return await LineService.update_line(line_id, line_in)
    except LineNotFoundError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{line_id}")
async def delete_line(line_id: int) -> Response:
    """Delete a line and its sections.  Answers 204 for an unknown id."""
    try:
        await LineService.delete_line(line_id)
    except LineNotFoundError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_200_OK)
