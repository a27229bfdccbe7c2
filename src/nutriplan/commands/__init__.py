"""CLI commands for nutriplan."""

from .export import export
from .generate import generate
from .init import init
from .plan import plan
from .progress import progress
from .refs import refs
from .serve import serve
from .settings import language, profile, reset

__all__ = [
    "export",
    "generate",
    "init",
    "language",
    "plan",
    "profile",
    "progress",
    "refs",
    "reset",
    "serve",
]
