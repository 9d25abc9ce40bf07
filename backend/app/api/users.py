"""Current-user identity endpoint."""

from fastapi import APIRouter, Depends

from backend.app.schemas.user import UserResponse
from backend.app.services.vote_ledger import VoteLedger
from backend.app.store import get_ledger

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user(ledger: VoteLedger = Depends(get_ledger)) -> dict:
    # The ledger's author is the one implicit user of this session
    return {"name": ledger.author}
