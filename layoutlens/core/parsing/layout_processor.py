"""
Procesa los grupos de layouts (newEdit, detail, history).
Las tres pasadas comparten un acumulador LayoutRegistries, de modo que un
campo presente en varios tipos de layout converge en un solo FieldRecord.
"""
from typing import Dict, List, Optional, Tuple
import xml.etree.ElementTree as ET
import logging

from .layout_elements import (
    ColumnField,
    ElementKind,
    LayoutDefinition,
    read_layout_definition,
)
from .models import (
    ButtonRecord,
    CardRecord,
    Dependency,
    FieldRecord,
    LayoutConfig,
    LayoutRegistries,
    ProfileMapping,
)
from .xml_loader import XMLLoader, text_content

logger = logging.getLogger(__name__)

CUSTOM_FIELD_PREFIX = "cust_"
BLANK_CELL = "blankcell"

# (selector de grupo, tipo de layout), en orden de prioridad
LAYOUT_PASSES: List[Tuple[str, str]] = [
    (".//NewEditLayouts", "newEdit"),
    (".//DetailLayoutsGroup/DetailLayout", "detail"),
    (".//HistoryLayoutsGroup/HistoryLayout", "history"),
]


def canonical_field_id(original_id: str) -> str:
    """Strips the custom-field prefix: ``cust_42`` -> ``42``."""
    if original_id.startswith(CUSTOM_FIELD_PREFIX):
        return original_id[len(CUSTOM_FIELD_PREFIX):]
    return original_id


def profile_name_from_layout(layout_name: str) -> str:
    """Text after the last ``:`` of the layout name, trimmed."""
    return layout_name.split(":")[-1].strip()


def merge_column(fields: Dict[str, FieldRecord],
                 column: ColumnField,
                 section_name: str,
                 layout_type: str) -> Optional[FieldRecord]:
    """
    Merges one layout column into the field registry.

    Args:
        fields: Registry keyed by canonical field id (mutated in place)
        column: Column read from the layout definition
        section_name: Name of the enclosing section
        layout_type: Layout type of the current pass

    Returns:
        The record the column was merged into, or None for blank cells
        and columns without a field id
    """
    original_id = column.field_id
    if not original_id or original_id == BLANK_CELL:
        return None

    field_id = canonical_field_id(original_id)
    record = fields.get(field_id)
    if record is None:
        record = FieldRecord(
            field_id=field_id,
            original_id=original_id,
            layout_label=column.label,
            section=section_name,
        )
        fields[field_id] = record

    record.layouts[layout_type] = LayoutConfig(
        is_required=column.required,
        is_read_only=column.read_only,
        is_hidden=column.hidden,
    )

    if column.visibility_options is not None:
        record.visibility_options = list(column.visibility_options)

    if column.dependents is not None:
        record.add_dependency_context(layout_type)
        for option in column.dependents:
            existing = record.find_dependency(option.on_value)
            if existing is not None:
                existing.add_children(option.child_fields)
            else:
                dependency = Dependency(on_value=option.on_value)
                dependency.add_children(option.child_fields)
                record.dependencies.append(dependency)

    return record


def register_layout(definition: LayoutDefinition,
                    group_id: Optional[str],
                    layout_type: str,
                    registries: LayoutRegistries) -> None:
    """Adds one parsed layout definition to the shared registries."""
    layout_name = definition.name

    if group_id is not None:
        profile_name = profile_name_from_layout(layout_name)
        if profile_name:
            registries.profiles[group_id] = ProfileMapping(
                profile_name=profile_name,
                layout_type=layout_type,
                group_id=group_id,
            )

    for element in definition.elements():
        if element.kind is ElementKind.CARD_CONTROL:
            record = CardRecord(name=element.card_name, layout_name=layout_name)
            registries.cards[record.key] = record
        elif element.kind is ElementKind.CUSTOM_BUTTON:
            if element.button_id is None:
                continue
            registries.buttons[element.button_id] = ButtonRecord(
                button_id=element.button_id,
                caption=element.caption,
                layout_name=layout_name,
            )
        elif element.kind is ElementKind.SECTION:
            for column in element.columns:
                merge_column(registries.fields, column, element.name, layout_type)
        else:
            raise ValueError(f"Unhandled layout element kind: {element.kind!r}")


def process_layouts(layout_root: ET.Element,
                    selector: str,
                    layout_type: str,
                    registries: LayoutRegistries) -> None:
    """
    Runs one layout-type pass over every group matching ``selector``.

    Embedded definitions that are empty or malformed are skipped; the rest of
    the group and the following groups are still processed.
    """
    for group in layout_root.findall(selector):
        group_id = group.get("GroupID")

        for xml_node in group.findall(".//Layout/LayoutXML"):
            outcome = XMLLoader.try_load_from_string(text_content(xml_node))
            if not outcome.ok:
                registries.skipped_layouts += 1
                logger.debug(
                    f"Skipping {layout_type} layout in group {group_id}: {outcome.error}"
                )
                continue

            register_layout(
                read_layout_definition(outcome.root),
                group_id,
                layout_type,
                registries,
            )


def parse_layouts(layout_root: ET.Element,
                  registries: Optional[LayoutRegistries] = None) -> LayoutRegistries:
    """Runs the newEdit, detail and history passes in that order."""
    if registries is None:
        registries = LayoutRegistries()

    for selector, layout_type in LAYOUT_PASSES:
        process_layouts(layout_root, selector, layout_type, registries)

    logger.info(
        f"Layouts processed: {len(registries.fields)} fields, "
        f"{len(registries.profiles)} profiles, {len(registries.cards)} cards, "
        f"{len(registries.buttons)} buttons, {registries.skipped_layouts} skipped"
    )
    return registries
