"""Helpers shared by the web routers."""

from urllib.parse import urlparse

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..models.user_profile import Language
from ..services.planner import PlannerService, Tab


def get_templates(request: Request) -> Jinja2Templates:
    """Get templates from app state."""
    return request.app.state.templates


def get_service(request: Request) -> PlannerService:
    """Get the planner from app state."""
    return request.app.state.service


def back_url(request: Request, default: str = "/") -> str:
    """Path of the referring page on this site, or ``default``."""
    referer = request.headers.get("referer")
    if not referer:
        return default
    parsed = urlparse(referer)
    if parsed.netloc and parsed.netloc != request.url.netloc:
        return default
    return parsed.path or default


def render(request: Request, name: str, context: dict | None = None, status_code: int = 200):
    """Render a page with the layout context every tab needs."""
    service = get_service(request)
    page = {
        "t": service.t,
        "state": service.state,
        "cards": service.summary_cards(),
        "tabs": list(Tab),
        "languages": [lang.value for lang in Language],
    }
    page.update(context or {})
    return get_templates(request).TemplateResponse(
        request, name, page, status_code=status_code
    )
