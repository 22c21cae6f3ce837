"""
Candidate endpoints.

Listing is public. Adding, updating and deleting candidates require the
admin capability, checked on every call by the CandidateRegistry.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.deps import get_candidate_registry
from schemas.candidate import (
    Candidate,
    CandidateCreate,
    CandidateMutationResponse,
    CandidateUpdate,
)
from schemas.converters import candidate_model_to_schema
from services.candidate_registry import CandidateRegistry

router = APIRouter()


@router.get("", response_model=list[Candidate])
async def list_candidates(
    registry: Annotated[CandidateRegistry, Depends(get_candidate_registry)],
) -> list[Candidate]:
    """List all candidates in the order they were added."""
    candidates = await registry.list()
    return [candidate_model_to_schema(c) for c in candidates]


@router.get("/{candidate_id}", response_model=Candidate)
async def get_candidate(
    candidate_id: int,
    registry: Annotated[CandidateRegistry, Depends(get_candidate_registry)],
) -> Candidate:
    candidate = await registry.get(candidate_id)
    return candidate_model_to_schema(candidate)


@router.post("", response_model=CandidateMutationResponse, status_code=status.HTTP_201_CREATED)
async def add_candidate(
    candidate_data: CandidateCreate,
    registry: Annotated[CandidateRegistry, Depends(get_candidate_registry)],
) -> CandidateMutationResponse:
    """Add a candidate (admin only)."""
    candidate = await registry.add(
        name=candidate_data.name,
        description=candidate_data.description,
        image_url=candidate_data.image_url,
        description_doc_id=candidate_data.description_doc_id,
    )
    return CandidateMutationResponse(
        message="Candidate added",
        candidate_id=candidate.id,
    )


@router.patch("/{candidate_id}", response_model=CandidateMutationResponse)
async def update_candidate(
    candidate_id: int,
    candidate_data: CandidateUpdate,
    registry: Annotated[CandidateRegistry, Depends(get_candidate_registry)],
) -> CandidateMutationResponse:
    """
    Partially update a candidate (admin only).

    Fields omitted from the body are left unchanged; fields sent as null are
    cleared.
    """
    await registry.update(candidate_id, candidate_data.model_dump(exclude_unset=True))
    return CandidateMutationResponse(
        message="Candidate updated",
        candidate_id=candidate_id,
    )


@router.delete("/{candidate_id}", response_model=CandidateMutationResponse)
async def delete_candidate(
    candidate_id: int,
    registry: Annotated[CandidateRegistry, Depends(get_candidate_registry)],
) -> CandidateMutationResponse:
    """Delete a candidate together with all votes cast for it (admin only)."""
    await registry.delete(candidate_id)
    return CandidateMutationResponse(
        message="Candidate deleted",
        candidate_id=candidate_id,
    )
