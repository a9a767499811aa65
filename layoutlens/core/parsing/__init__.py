"""
Módulo de parseo del export combinado de layouts y esquema de campos.
"""

from .xml_loader import XMLLoader, NestedParseOutcome
from .layout_elements import ElementKind, LayoutDefinition, read_layout_definition
from .models import (
    ButtonRecord,
    CardRecord,
    CombinedResult,
    DbFieldRecord,
    Dependency,
    FieldRecord,
    LayoutConfig,
    LayoutRegistries,
    ProfileMapping,
)
from .layout_processor import LAYOUT_PASSES, canonical_field_id, parse_layouts, process_layouts
from .field_schema import parse_field_schema
from .orchestrator import CombinedExportOrchestrator, parse_combined
from .serialization import pairs_to_registry, registry_to_pairs
from .exceptions import (
    LayoutExportError,
    XmlSyntaxError,
    MissingRootError,
    MissingLayoutDataError,
    UnsupportedTaskError,
)

__version__ = "1.0.0"
__all__ = [
    # Clases principales
    'XMLLoader',
    'NestedParseOutcome',
    'CombinedExportOrchestrator',
    'ElementKind',
    'LayoutDefinition',

    # Modelos
    'ButtonRecord',
    'CardRecord',
    'CombinedResult',
    'DbFieldRecord',
    'Dependency',
    'FieldRecord',
    'LayoutConfig',
    'LayoutRegistries',
    'ProfileMapping',

    # Excepciones
    'LayoutExportError',
    'XmlSyntaxError',
    'MissingRootError',
    'MissingLayoutDataError',
    'UnsupportedTaskError',

    # Funciones de conveniencia
    'LAYOUT_PASSES',
    'canonical_field_id',
    'parse_combined',
    'parse_field_schema',
    'parse_layouts',
    'process_layouts',
    'read_layout_definition',
    'pairs_to_registry',
    'registry_to_pairs',
]
