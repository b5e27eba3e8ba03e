"""Built-in catalog of starter templates."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import TemplateNotFoundError

__all__ = ["DEFAULT_CATALOG", "Template", "TemplateCatalog"]


class Template(BaseModel):
    """Starter project that can be cloned into a new directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Short identifier, unique within a catalog.")
    description: str = Field(..., description="Human-readable summary shown in listings.")
    repository: str = Field(..., min_length=1, description="Location passed to git clone.")
    post_clone_instructions: Tuple[str, ...] = Field(
        default=(),
        description="Shell commands suggested to the user once the project exists.",
    )


class TemplateCatalog:
    """Ordered, read-only collection of :class:`Template` records."""

    def __init__(self, templates: Iterable[Template]) -> None:
        entries = tuple(templates)
        if not entries:
            raise ValueError("a template catalog needs at least one template")

        seen: set[str] = set()
        for template in entries:
            if template.name in seen:
                raise ValueError(f"duplicate template name '{template.name}'")
            seen.add(template.name)

        self._templates = entries

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def templates(self) -> tuple[Template, ...]:
        """Templates in catalog order."""

        return self._templates

    def names(self) -> list[str]:
        return [template.name for template in self._templates]

    def find(self, name: str) -> Template | None:
        """Return the template called exactly ``name`` or ``None``."""

        for template in self._templates:
            if template.name == name:
                return template
        return None

    def get(self, name: str) -> Template:
        """Return the template called ``name``.

        Raises
        ------
        TemplateNotFoundError
            When no template has that exact name. Matching is case sensitive
            and never partial.
        """

        template = self.find(name)
        if template is None:
            raise TemplateNotFoundError(name, self)
        return template


DEFAULT_CATALOG = TemplateCatalog(
    [
        Template(
            name="vue-ts",
            description="Vue TypeScript project template for daily development",
            repository="https://github.com/xx-template/vue-ts.git",
            post_clone_instructions=("npm install", "npm run dev"),
        ),
        Template(
            name="lib-ts",
            description="TypeScript library template for package development",
            repository="https://github.com/xx-template/lib-ts.git",
            post_clone_instructions=("npm install", "npm run build"),
        ),
    ]
)
