"""Group a page's plugin instances by section label.

Pure data: each instance becomes a ``PluginEntry`` carrying its
definition and settings, appended to its section in input order.
Deciding which implementation renders a definition is left to the
presentation layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from wren.bundle import PluginEntry
from wren.errors import MissingDefinitionForInstance
from wren.models import PluginDefinition, PluginInstance, Settings

_NO_SETTINGS: Mapping[str, str] = MappingProxyType({})


def aggregate_sections(
    instances: Iterable[PluginInstance],
    definitions: Mapping[str, PluginDefinition],
    settings: Mapping[str, Mapping[str, str]],
) -> Mapping[str, tuple[PluginEntry, ...]]:
    """Build a read-only ``{section: (entry, ...)}`` from *instances*.

    Sections appear in order of first use; entries keep input order
    within their section. An instance gets the settings stored under its
    id, copied into a read-only mapping, or an empty one.

    Args:
        instances: Plugin instances of one page, in placement order.
        definitions: Every plugin definition, keyed by id.
        settings: Stored settings values, keyed by plugin instance id.

    Raises:
        MissingDefinitionForInstance: If an instance's definition id is
            not in *definitions*.
    """
    grouped: dict[str, list[PluginEntry]] = {}

    for instance in instances:
        definition = definitions.get(instance.definition_id)
        if definition is None:
            raise MissingDefinitionForInstance(instance.id, instance.definition_id)

        values = settings.get(instance.id)
        entry = PluginEntry(
            id=instance.id,
            definition=definition,
            section=instance.section,
            settings=MappingProxyType(dict(values)) if values else _NO_SETTINGS,
            order=instance.order,
            cols=instance.cols,
            locked=instance.locked,
        )

        if instance.section not in grouped:
            grouped[instance.section] = []
        grouped[instance.section].append(entry)

    return MappingProxyType({section: tuple(entries) for section, entries in grouped.items()})


def settings_by_id(records: Iterable[Settings]) -> dict[str, Mapping[str, str]]:
    """Key stored settings records by the id of the entity that owns them."""
    return {record.id: record.values for record in records}
