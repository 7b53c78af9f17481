"""Wren exception hierarchy.

Shared across the composition stages, the collaborator services, and the
CLI so every module raises and catches the same types.

Two families matter to callers:

- ``NotFound`` — a requested site, page, or layout does not exist.
  Terminal for the request; callers map it to a not-found response.
- ``DataIntegrityError`` — upstream data violates an invariant the
  composer relies on (dangling parent, missing plugin definition, ...).
  Surfaces as an unrecoverable server-side failure.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when composer configuration is invalid.

    Typically raised by ``ComposerConfig.validate()`` when a
    ``PageComposer`` is created.
    """


class InvalidUrl(WrenError, ValueError):  # noqa: N818
    """Raised when a request URL cannot be split into domain and path."""


@dataclass(frozen=True, slots=True)
class CompositionError(WrenError):
    """An error raised while composing a page bundle.

    Carries an HTTP-ish ``status`` so callers can map it to a response
    without a lookup table, and a stable dotted ``code`` for clients.
    """

    status: int
    code: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status} {self.code}: {self.detail}"
        return f"{self.status} {self.code}"


class NotFound(CompositionError):  # noqa: N818
    """404 — a requested entity does not exist."""

    def __init__(self, code: str = "General.NotFound", detail: str = "Not Found") -> None:
        super().__init__(status=404, code=code, detail=detail)


class SiteNotFound(NotFound):
    """No site is registered for the requested domain."""

    def __init__(self, domain: str) -> None:
        super().__init__(code="Site.NotFound", detail=f"No site for domain {domain!r}")


class PageNotFound(NotFound):
    """No page of the site has the requested full path."""

    def __init__(self, path: str) -> None:
        super().__init__(code="Page.NotFound", detail=f"No page at path {path!r}")


class LayoutNotFound(NotFound):
    """A resolved layout id is unknown to the layout service."""

    def __init__(self, layout_id: str) -> None:
        super().__init__(code="Layout.NotFound", detail=f"No layout with id {layout_id!r}")


class DataIntegrityError(CompositionError):
    """500 — upstream data breaks an invariant the composer depends on."""

    def __init__(self, code: str = "General.DataIntegrity", detail: str = "") -> None:
        super().__init__(status=500, code=code, detail=detail)


class DuplicatePagePath(DataIntegrityError):
    """Two pages of one site produce the same full path (strict mode only)."""

    def __init__(self, path: str) -> None:
        super().__init__(code="Page.PathMustBeUnique", detail=f"Duplicate full path {path!r}")


class MissingDefinitionForInstance(DataIntegrityError):
    """A plugin instance references a definition that does not exist."""

    def __init__(self, instance_id: str, definition_id: str) -> None:
        super().__init__(
            code="Plugin.DefinitionNotFound",
            detail=f"Plugin {instance_id!r} references unknown definition {definition_id!r}",
        )


class MissingParentReference(DataIntegrityError):
    """A page references a parent id absent from the site's pages."""

    def __init__(self, page_id: str, parent_id: str) -> None:
        super().__init__(
            code="Page.ParentNotFound",
            detail=f"Page {page_id!r} references unknown parent {parent_id!r}",
        )


class MissingDefaultType(DataIntegrityError):
    """A plugin definition has no type marked as default."""

    def __init__(self, definition_id: str) -> None:
        super().__init__(
            code="PluginDefinition.DefaultTypeNotFound",
            detail=f"Plugin definition {definition_id!r} has no default type",
        )
