"""Scientific references route."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...data.medical_data import GENETIC_MARKERS, get_medications_impact, get_references
from ...services.planner import Tab
from ..dependencies import get_service, render

router = APIRouter(prefix="/refs", tags=["refs"])


@router.get("", response_class=HTMLResponse)
async def refs_page(request: Request):
    """References, medication impact and genetic markers."""
    service = get_service(request)
    service.set_tab(Tab.REFS)
    lang = service.state.language.value

    return render(
        request,
        "refs.html",
        {
            "references": get_references(lang),
            "medications": get_medications_impact(lang),
            "markers": [(m.label, m.describe(lang)) for m in GENETIC_MARKERS],
        },
    )
