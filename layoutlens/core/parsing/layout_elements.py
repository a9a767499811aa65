"""
Variantes tipadas de los elementos de una definición de layout.
Cada elemento (control con tarjeta, botón personalizado, sección) se lee una
sola vez a su propia dataclass; el registro despacha por ElementKind.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union
import xml.etree.ElementTree as ET

from .xml_loader import find_first, iter_descendants

UNKNOWN_LAYOUT = "Unknown Layout"
UNNAMED_SECTION = "Unnamed Section"
CARD_NAME_PROPERTY = "CardName"
REQUIRED_VALUES = frozenset({"1", "2"})


class ElementKind(str, Enum):
    CARD_CONTROL = "card_control"
    CUSTOM_BUTTON = "custom_button"
    SECTION = "section"


@dataclass(frozen=True)
class DependentOption:
    """One <option> of a <dependents> block."""
    on_value: Optional[str]
    child_fields: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CardControl:
    card_name: str
    kind: ElementKind = ElementKind.CARD_CONTROL


@dataclass(frozen=True)
class CustomButton:
    button_id: Optional[str]
    caption: Optional[str]
    kind: ElementKind = ElementKind.CUSTOM_BUTTON


@dataclass(frozen=True)
class ColumnField:
    """
    A <col> inside a section.

    ``visibility_options`` is None when the column has no visibility option
    node; ``dependents`` is None when it has no <dependents> node.
    """
    field_id: Optional[str]
    label: Optional[str]
    required: bool = False
    read_only: bool = False
    hidden: bool = False
    visibility_options: Optional[List[str]] = None
    dependents: Optional[List[DependentOption]] = None


@dataclass(frozen=True)
class SectionBlock:
    name: str
    columns: List[ColumnField] = field(default_factory=list)
    kind: ElementKind = ElementKind.SECTION


LayoutElement = Union[CardControl, CustomButton, SectionBlock]


@dataclass(frozen=True)
class LayoutDefinition:
    """Everything the merge step needs from one embedded layout document."""
    name: str
    cards: List[CardControl] = field(default_factory=list)
    buttons: List[CustomButton] = field(default_factory=list)
    sections: List[SectionBlock] = field(default_factory=list)

    def elements(self) -> List[LayoutElement]:
        """Cards, then buttons, then sections."""
        return [*self.cards, *self.buttons, *self.sections]


def _lang_text(element: ET.Element) -> Optional[str]:
    lang = find_first(element, "text/lang")
    return lang.get("text") if lang is not None else None


def read_card_controls(root: ET.Element) -> List[CardControl]:
    cards = []
    for control in iter_descendants(root, "control", include_self=True):
        if control.get("CardName") is None:
            continue
        prop = find_first(control, f"property[@name='{CARD_NAME_PROPERTY}']")
        card_name = prop.get("value") if prop is not None else None
        if card_name:
            cards.append(CardControl(card_name=card_name))
    return cards


def read_custom_buttons(root: ET.Element) -> List[CustomButton]:
    return [
        CustomButton(button_id=button.get("id"), caption=button.get("caption"))
        for button in iter_descendants(root, "button", include_self=True)
        if button.get("iscustom") == "1"
    ]


def read_dependents(dependents: ET.Element) -> List[DependentOption]:
    options = []
    for option in iter_descendants(dependents, "option"):
        children = [
            dep.get("id")
            for dep in iter_descendants(option, "dependent")
            if dep.get("id") is not None
        ]
        options.append(DependentOption(on_value=option.get("name"), child_fields=children))
    return options


def read_column(col: ET.Element) -> ColumnField:
    visibility_options = None
    visibility = find_first(col, "visibility/visibilityoption")
    if visibility is not None:
        display_names = visibility.get("displaynames")
        visibility_options = display_names.split(",") if display_names is not None else []

    dependents = None
    dependents_node = find_first(col, "dependents")
    if dependents_node is not None:
        dependents = read_dependents(dependents_node)

    return ColumnField(
        field_id=col.get("fieldid"),
        label=_lang_text(col) or col.get("name"),
        required=col.get("req") in REQUIRED_VALUES,
        read_only=col.get("readonly") == "1",
        hidden=col.get("hide") == "1",
        visibility_options=visibility_options,
        dependents=dependents,
    )


def read_sections(root: ET.Element) -> List[SectionBlock]:
    sections = []
    for section in iter_descendants(root, "section", include_self=True):
        columns = [read_column(col) for col in iter_descendants(section, "col")]
        sections.append(SectionBlock(name=_lang_text(section) or UNNAMED_SECTION, columns=columns))
    return sections


def read_layout_definition(root: ET.Element) -> LayoutDefinition:
    """Reads the root of an embedded layout document into a LayoutDefinition."""
    return LayoutDefinition(
        name=root.get("layoutname") or UNKNOWN_LAYOUT,
        cards=read_card_controls(root),
        buttons=read_custom_buttons(root),
        sections=read_sections(root),
    )
