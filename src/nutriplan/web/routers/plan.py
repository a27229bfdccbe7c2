"""Weekly plan routes."""

import json

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from ...exceptions import StaleSwapError
from ...models.diet import DAYS_PER_WEEK, Meal, MealSlot
from ...services.planner import Tab
from ..dependencies import get_service, render

router = APIRouter(prefix="/plan", tags=["plan"])


@router.get("", response_class=HTMLResponse)
async def plan_page(request: Request, day: int = 0):
    """Weekly plan with one day expanded."""
    service = get_service(request)
    diet = service.state.diet
    if diet is None:
        return RedirectResponse(url="/profile", status_code=302)

    service.set_tab(Tab.PLAN)
    day = min(max(day, 0), len(diet.plan) - 1)

    return render(
        request,
        "plan.html",
        {
            "diet": diet,
            "day_index": day,
            "day": diet.get_day(day),
            "slots": list(MealSlot),
        },
    )


@router.post("/alternatives")
async def meal_alternatives(
    request: Request,
    day: int = Form(..., ge=0, lt=DAYS_PER_WEEK),
    slot: MealSlot = Form(...),
):
    """Ask the generator for substitutes of one meal.

    The returned token must be sent back with the chosen meal.
    """
    service = get_service(request)
    token, alternatives = await service.request_alternatives(day, slot)

    return {
        "token": token,
        "alternatives": [meal.to_dict() for meal in alternatives],
        "message": None if alternatives else service.t["no_alternatives"],
    }


@router.post("/swap")
async def swap_meal(
    request: Request,
    day: int = Form(..., ge=0, lt=DAYS_PER_WEEK),
    slot: MealSlot = Form(...),
    meal: str = Form(...),
    token: int | None = Form(None),
):
    """Replace one meal with a chosen alternative."""
    service = get_service(request)

    try:
        replacement = Meal.from_dict(json.loads(meal))
    except (ValueError, KeyError, TypeError) as e:
        return JSONResponse({"error": f"Invalid meal: {e}"}, status_code=400)

    try:
        diet = await service.swap_meal(day, slot, replacement, token=token)
    except StaleSwapError as e:
        return JSONResponse({"error": str(e)}, status_code=409)

    updated = diet.get_day(day)
    return {
        "status": "swapped",
        "day": day,
        "slot": slot.value,
        "meal": replacement.to_dict(),
        "totalCalories": updated.total_calories,
    }
