"""FastAPI application for the nutriplan web interface."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..agents import DietPlanGenerator
from ..config import Settings, get_settings
from ..db import StateRepository, get_db_path, init_db
from ..exceptions import NoProfileError
from ..models.user_profile import Language
from ..services.planner import PlannerService
from .dependencies import back_url, get_service
from .routers import plan, profile, refs, tracking


# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    service: PlannerService = app.state.service
    await init_db(service.repository.store.db_path)
    await service.load()
    yield


def create_app(
    service: PlannerService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: Planner to serve; built from settings when omitted
        settings: Runtime settings; read from the environment when omitted
    """
    if service is None:
        settings = settings or get_settings()
        service = PlannerService(
            repository=StateRepository(get_db_path(settings.data_dir)),
            generator=DietPlanGenerator(settings),
            default_language=settings.default_language,
        )

    app = FastAPI(
        title="nutriplan",
        description="AI-Powered Nutrition Planner",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Mount static files
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # One planner per app; routers reach it through app.state
    app.state.service = service
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    # Include routers
    app.include_router(plan.router)
    app.include_router(tracking.router)
    app.include_router(profile.router)
    app.include_router(refs.router)

    @app.exception_handler(NoProfileError)
    async def no_profile_handler(request: Request, exc: NoProfileError):
        """Send users without a profile or plan to onboarding."""
        return RedirectResponse(url="/profile", status_code=302)

    @app.get("/", response_class=HTMLResponse)
    async def root(request: Request):
        """Redirect to onboarding or to the active tab."""
        state = get_service(request).state
        if not state.has_profile:
            return RedirectResponse(url="/profile", status_code=302)
        return RedirectResponse(url=f"/{state.active_tab.value}", status_code=302)

    @app.post("/language")
    async def set_language(request: Request, lang: Language = Form(...)):
        """Switch the display language."""
        await get_service(request).set_language(lang)
        return RedirectResponse(url=back_url(request), status_code=302)

    @app.post("/reset")
    async def reset(request: Request):
        """Delete all user data and return to onboarding."""
        await get_service(request).reset()
        return RedirectResponse(url="/profile", status_code=302)

    @app.post("/error/dismiss")
    async def dismiss_error(request: Request):
        """Hide the error banner."""
        get_service(request).dismiss_error()
        return RedirectResponse(url=back_url(request), status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
