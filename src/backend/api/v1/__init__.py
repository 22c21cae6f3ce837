"""
API v1 router aggregating all endpoints.
"""

from fastapi import APIRouter

from api.v1.candidates import router as candidates_router
from api.v1.tally import router as tally_router
from api.v1.voters import router as voters_router
from api.v1.votes import router as votes_router

router = APIRouter()

router.include_router(candidates_router, prefix="/candidates", tags=["Candidates"])
router.include_router(voters_router, prefix="/voters", tags=["Voters"])
router.include_router(votes_router, prefix="/votes", tags=["Votes"])
router.include_router(tally_router, prefix="/tally", tags=["Results"])
