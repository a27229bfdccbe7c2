"""Progress tracking routes."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ...generators.history_report import (
    CSV_FILENAME,
    HistoryReportGenerator,
    ReportConfig,
    pdf_filename,
)
from ...models.user_profile import VALID_RANGES
from ...services.planner import Tab
from ...utils.calculators import format_date
from ..dependencies import get_service, render

router = APIRouter(prefix="/tracking", tags=["tracking"])


def _report_generator(request: Request) -> HistoryReportGenerator:
    language = get_service(request).state.language.value
    return HistoryReportGenerator(ReportConfig(language=language))


@router.get("", response_class=HTMLResponse)
async def tracking_page(request: Request):
    """History table and charts."""
    service = get_service(request)
    if not service.state.has_profile:
        return RedirectResponse(url="/profile", status_code=302)

    service.set_tab(Tab.TRACKING)
    lang = service.state.language.value
    history = service.state.history

    return render(
        request,
        "tracking.html",
        {
            "history": history,
            "chart": {
                "labels": [format_date(e.date, lang) for e in history],
                "weight": [e.weight for e in history],
                "waist": [e.waist for e in history],
                "bmi": [e.bmi for e in history],
            },
            "format_date": format_date,
        },
    )


@router.post("/log")
async def log_progress(
    request: Request,
    weight: float = Form(...),
    waist: float = Form(...),
):
    """Record a weight/waist sample."""
    service = get_service(request)

    for name, value in (("weight", weight), ("waist", waist)):
        low, high = VALID_RANGES[name]
        if not low <= value <= high:
            service.state.error = f"{service.t['error_invalid_range']}: {name} ({low}-{high})"
            return RedirectResponse(url="/tracking", status_code=302)

    await service.log_progress(weight, waist)
    return RedirectResponse(url="/tracking", status_code=302)


@router.get("/export/pdf")
async def export_pdf(request: Request):
    """Download the history as a PDF report."""
    history = get_service(request).state.history
    content = _report_generator(request).to_pdf(history)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf_filename()}"'},
    )


@router.get("/export/csv")
async def export_csv(request: Request):
    """Download the history as CSV."""
    history = get_service(request).state.history
    content = _report_generator(request).to_csv(history)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@router.get("/share")
async def share(request: Request):
    """Open a prefilled e-mail with the latest entry."""
    url = _report_generator(request).to_mailto(get_service(request).state.history)
    if url is None:
        return RedirectResponse(url="/tracking", status_code=302)
    return RedirectResponse(url=url, status_code=302)
