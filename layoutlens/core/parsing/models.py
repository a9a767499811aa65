"""
Modelos de datos del resultado combinado.
``to_dict`` produce los nombres de clave que ya consume el front end.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .serialization import registry_to_pairs

YES = "Yes"
NO = "No"


def _flag(value: bool) -> str:
    return YES if value else NO


@dataclass
class LayoutConfig:
    """Per-layout-type flags of a field."""
    is_required: bool = False
    is_read_only: bool = False
    is_hidden: bool = False

    def to_dict(self) -> Dict[str, str]:
        return {
            "isRequired": _flag(self.is_required),
            "isReadOnly": _flag(self.is_read_only),
            "isHidden": _flag(self.is_hidden),
        }


@dataclass
class Dependency:
    on_value: Optional[str]
    child_fields: List[str] = field(default_factory=list)

    def add_children(self, child_fields: List[str]) -> None:
        """Appends child ids keeping the first occurrence of each."""
        self.child_fields = list(dict.fromkeys(self.child_fields + list(child_fields)))

    def to_dict(self) -> Dict[str, Any]:
        return {"onValue": self.on_value, "childFields": list(self.child_fields)}


@dataclass
class LovSlots:
    # Reserved for the client-side LOV merge; extraction leaves them None.
    database: Optional[List[str]] = None
    layout: Optional[List[str]] = None
    dependency: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"database": self.database, "layout": self.layout, "dependency": self.dependency}


@dataclass
class FieldRecord:
    """
    A field merged across every layout type it appears in.

    ``field_id``, ``original_id``, ``layout_label`` and ``section`` are set
    once, by the first layout pass that sees the field.
    """
    field_id: str
    original_id: str
    layout_label: Optional[str]
    section: str
    layouts: Dict[str, LayoutConfig] = field(default_factory=dict)
    visibility_options: Optional[List[str]] = None
    dependency_contexts: List[str] = field(default_factory=list)
    dependencies: List[Dependency] = field(default_factory=list)
    db_info: Optional[Dict[str, Any]] = None
    lovs: LovSlots = field(default_factory=LovSlots)

    def add_dependency_context(self, layout_type: str) -> None:
        if layout_type not in self.dependency_contexts:
            self.dependency_contexts.append(layout_type)

    def find_dependency(self, on_value: Optional[str]) -> Optional[Dependency]:
        for dependency in self.dependencies:
            if dependency.on_value == on_value:
                return dependency
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fieldId": self.field_id,
            "layoutLabel": self.layout_label,
            "section": self.section,
            "originalId": self.original_id,
            "layouts": {name: config.to_dict() for name, config in self.layouts.items()},
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "dependencyContexts": list(self.dependency_contexts),
            "visibilityOptions": (
                list(self.visibility_options) if self.visibility_options is not None else None
            ),
            "dbInfo": self.db_info,
            "lovs": self.lovs.to_dict(),
        }


@dataclass
class ProfileMapping:
    profile_name: str
    layout_type: str
    group_id: str

    def to_dict(self) -> Dict[str, str]:
        return {"Profile": self.profile_name, "Type": self.layout_type, "GroupID": self.group_id}


@dataclass
class CardRecord:
    name: str
    layout_name: str

    @property
    def key(self) -> str:
        return f"{self.layout_name}-{self.name}"

    def to_dict(self) -> Dict[str, str]:
        return {"Name": self.name, "Layout": self.layout_name}


@dataclass
class ButtonRecord:
    button_id: str
    caption: Optional[str]
    layout_name: str

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"ID": self.button_id, "Caption": self.caption, "Layout": self.layout_name}


@dataclass
class DbFieldRecord:
    """Database column backing a field, from the <Fields> schema section."""
    field_id: str
    label: Optional[str] = None
    field_type: Optional[str] = None
    length: Optional[str] = None
    default_value: Optional[str] = None
    table_name: Optional[str] = None
    field_name: Optional[str] = None
    column_name: str = ""
    lovs: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "FieldID": self.field_id,
            "Label": self.label,
            "FieldType": self.field_type,
            "Length": self.length,
            "DefaultValue": self.default_value,
            "TableName": self.table_name,
            "FieldName": self.field_name,
            "ColumnName": self.column_name,
            "LOVS": list(self.lovs) if self.lovs is not None else None,
        }


@dataclass
class LayoutRegistries:
    """Accumulator shared by the three layout passes of one extraction."""
    fields: Dict[str, FieldRecord] = field(default_factory=dict)
    profiles: Dict[str, ProfileMapping] = field(default_factory=dict)
    cards: Dict[str, CardRecord] = field(default_factory=dict)
    buttons: Dict[str, ButtonRecord] = field(default_factory=dict)
    skipped_layouts: int = 0


@dataclass(frozen=True)
class CombinedResult:
    """
    Snapshot returned by one ``parse_combined`` call.

    Only the registries are read-only (``MappingProxyType``): keys cannot be
    added, replaced or removed. The records inside are the same mutable
    dataclasses the passes built; callers that need an isolated copy should
    use ``to_transport``.
    """
    fields: Mapping[str, FieldRecord]
    profiles: Mapping[str, ProfileMapping]
    cards: Mapping[str, CardRecord]
    buttons: Mapping[str, ButtonRecord]
    db_fields: Mapping[str, DbFieldRecord]
    skipped_layouts: int = 0

    def to_transport(self) -> Dict[str, Any]:
        """Registries as ordered [key, value] pair lists."""
        return {
            "masterFieldMap": registry_to_pairs(self.fields),
            "profileMapping": registry_to_pairs(self.profiles),
            "cards": registry_to_pairs(self.cards),
            "buttons": registry_to_pairs(self.buttons),
            "dbData": registry_to_pairs(self.db_fields),
            "skippedLayouts": self.skipped_layouts,
        }
