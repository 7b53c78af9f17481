"""Wren — page composition for multi-site content management.

Resolves a requested site URL into a render-ready page bundle: the page,
its layouts, its plugins grouped by section with their settings, and the
requesting user's roles.

Basic usage::

    from wren import MemoryStore, PageComposer, UserIdentity

    store = MemoryStore.from_json_file("site.json")
    composer = PageComposer(store.services())
    bundle = await composer.compose_url(
        "https://example.com/blog/post-1",
        UserIdentity(user_id="u1"),
    )
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ComposedPageBundle",
    "ComposerConfig",
    "ConfigurationError",
    "DataIntegrityError",
    "MemoryStore",
    "NotFound",
    "PageComposer",
    "PageNotFound",
    "Services",
    "SiteNotFound",
    "UserIdentity",
    "WrenError",
]

# name -> defining module; resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "ComposedPageBundle": "wren.bundle",
    "ComposerConfig": "wren.config",
    "ConfigurationError": "wren.errors",
    "DataIntegrityError": "wren.errors",
    "MemoryStore": "wren.memory",
    "NotFound": "wren.errors",
    "PageComposer": "wren.compose.assembler",
    "PageNotFound": "wren.errors",
    "Services": "wren.services",
    "SiteNotFound": "wren.errors",
    "UserIdentity": "wren.models",
    "WrenError": "wren.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
