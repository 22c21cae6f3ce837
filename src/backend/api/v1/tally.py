"""
Election results endpoint. Public.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_tally_engine
from schemas.converters import tally_to_schema
from schemas.tally import TallyResponse
from services.tally_engine import TallyEngine

router = APIRouter()


@router.get("", response_model=TallyResponse)
async def get_tally(
    engine: Annotated[TallyEngine, Depends(get_tally_engine)],
) -> TallyResponse:
    """Vote counts for every current candidate."""
    return tally_to_schema(await engine.get_tally())
