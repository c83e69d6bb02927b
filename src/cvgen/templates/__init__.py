"""Resume templates, looked up by the name used in settings and on the CLI."""

from __future__ import annotations

from cvgen.templates.base import ResumeTemplate
from cvgen.templates.jake import JakeResumeTemplate
from cvgen.templates.modern import ModernResumeTemplate

__all__ = [
    "DEFAULT_TEMPLATE",
    "ResumeTemplate",
    "get_template",
    "list_templates",
]

DEFAULT_TEMPLATE = "jake"

_TEMPLATES: dict[str, type[ResumeTemplate]] = {
    "jake": JakeResumeTemplate,
    "modern": ModernResumeTemplate,
}


def get_template(name: str) -> ResumeTemplate:
    """Instantiate the template registered as *name*.

    Raises:
        ValueError: If *name* is not one of :func:`list_templates`.
    """
    template_cls = _TEMPLATES.get(name)
    if template_cls is None:
        raise ValueError(f"Unknown template {name!r}. Available: {', '.join(list_templates())}")
    return template_cls()


def list_templates() -> list[str]:
    return sorted(_TEMPLATES)
