"""Registry of the bundled project templates.

Each template is a directory under ``create_webpack_starter/templates/`` that
is copied verbatim into the new project.  The registry is closed: adding a
template means adding both a directory and an entry below.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Template root discovery
# ---------------------------------------------------------------------------

# Registry paths are relative to the installed package directory.
TEMPLATE_ROOT = Path(__file__).resolve().parent


class TemplateDescriptor(BaseModel):
    """One selectable template."""

    model_config = ConfigDict(frozen=True)

    key: str
    path: str
    description: str


TEMPLATES: dict[str, TemplateDescriptor] = {
    descriptor.key: descriptor
    for descriptor in (
        TemplateDescriptor(
            key="pug-scss-js",
            path="templates/pug-scss-js",
            description="Pug + SCSS + JavaScript",
        ),
        TemplateDescriptor(
            key="pug-scss-ts",
            path="templates/pug-scss-ts",
            description="Pug + SCSS + TypeScript",
        ),
        TemplateDescriptor(
            key="pug-less-js",
            path="templates/pug-less-js",
            description="Pug + LESS + JavaScript",
        ),
    )
}


def get_template(key: str) -> TemplateDescriptor | None:
    """Return the descriptor registered under *key*, or ``None``."""
    return TEMPLATES.get(key)


def template_choices() -> list[tuple[str, str]]:
    """Return ``(label, key)`` pairs in registry order."""
    return [(descriptor.description, key) for key, descriptor in TEMPLATES.items()]


def resolve_template_path(key: str, root: str | Path = TEMPLATE_ROOT) -> Path:
    """Return the absolute source directory of the template *key*.

    Raises:
        KeyError: If *key* is not a registered template.
    """
    descriptor = get_template(key)
    if descriptor is None:
        raise KeyError(f"Unknown template: {key}")
    return Path(root) / descriptor.path
