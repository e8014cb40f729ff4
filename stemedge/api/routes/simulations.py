from fastapi import APIRouter, HTTPException
from stemedge.api.routes.lessons import get_view_or_404
from stemedge.models.schemas import (
    CarbonStateResponse, FoodWebClickResponse, FoodWebStateResponse, OrganismClickRequest,
    PopulationStateResponse, TransferRequest, TransferResponse
)
from stemedge.services.carbon_cycle import CarbonCycle
from stemedge.services.food_web import FoodWebBuilder, UnknownOrganismError
from stemedge.services.population import PopulationSimulator

router = APIRouter()


def population_state(sim: PopulationSimulator) -> PopulationStateResponse:
    return PopulationStateResponse(running=sim.running, history=list(sim.history))


def food_web_state(web: FoodWebBuilder) -> dict:
    return {
        "organisms": list(web.organisms.values()),
        "edges": list(web.edges),
        "selected_id": web.selected_id,
        "message": web.message,
    }


def carbon_state(cycle: CarbonCycle) -> dict:
    return {
        "reservoirs": list(cycle.reservoirs.values()),
        "total": cycle.total,
        "active_action": cycle.active_action,
    }


# ---- Population dynamics ----

@router.get("/views/{view_id}/population", response_model=PopulationStateResponse)
async def get_population(view_id: str):
    return population_state(get_view_or_404(view_id).population)


@router.post("/views/{view_id}/population/{command}", response_model=PopulationStateResponse)
async def control_population(view_id: str, command: str):
    """Command is one of 'start', 'pause' or 'reset'."""
    if command not in ["start", "pause", "reset"]:
        raise HTTPException(status_code=400, detail="Command must be 'start', 'pause' or 'reset'")

    sim = get_view_or_404(view_id).population
    getattr(sim, command)()
    return population_state(sim)


# ---- Food web ----

@router.get("/views/{view_id}/food-web", response_model=FoodWebStateResponse)
async def get_food_web(view_id: str):
    return FoodWebStateResponse(**food_web_state(get_view_or_404(view_id).food_web))


@router.post("/views/{view_id}/food-web/click", response_model=FoodWebClickResponse)
async def click_organism(view_id: str, request: OrganismClickRequest):
    web = get_view_or_404(view_id).food_web
    try:
        result = web.click(request.organism_id)
    except UnknownOrganismError:
        raise HTTPException(status_code=404, detail=f"Unknown organism: {request.organism_id}")
    return FoodWebClickResponse(outcome=result.outcome, **food_web_state(web))


@router.post("/views/{view_id}/food-web/reset", response_model=FoodWebStateResponse)
async def reset_food_web(view_id: str):
    web = get_view_or_404(view_id).food_web
    web.reset()
    return FoodWebStateResponse(**food_web_state(web))


# ---- Carbon cycle ----

@router.get("/views/{view_id}/carbon", response_model=CarbonStateResponse)
async def get_carbon(view_id: str):
    return CarbonStateResponse(**carbon_state(get_view_or_404(view_id).carbon))


@router.post("/views/{view_id}/carbon/transfer", response_model=TransferResponse)
async def transfer_carbon(view_id: str, request: TransferRequest):
    """Run a named transfer; accepted is False while the previous one is settling."""
    cycle = get_view_or_404(view_id).carbon
    try:
        accepted = cycle.run_action(request.action)
    except KeyError:
        raise HTTPException(status_code=400, detail=f"Unknown carbon action: {request.action}")
    return TransferResponse(accepted=accepted, **carbon_state(cycle))
