from fastapi import APIRouter

from exceptions import APIError
from schemas.common import StateInfo
from services.states import list_states, normalization_key, normalize_state

router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/states", response_model=list[StateInfo])
async def get_states():
    """Get the list of states accepted by the lease clause endpoint"""
    return list_states()


@router.get("/states/{query}", response_model=StateInfo)
async def get_state(query: str):
    """Resolve a free-text state name to its canonical form"""
    canonical = normalize_state(query)
    if canonical is None:
        raise APIError(f"State {query} not found", status_code=404)
    return StateInfo(name=canonical, key=normalization_key(canonical))
