"""
Orchestrator para el export combinado (<FinalOutput>).
Localiza las secciones de layouts y de campos, invoca los extractores y
arma el resultado final.
"""
from types import MappingProxyType
from typing import Optional, Tuple
import xml.etree.ElementTree as ET
import logging

from .exceptions import MissingLayoutDataError, MissingRootError
from .field_schema import parse_field_schema
from .layout_processor import parse_layouts
from .models import CombinedResult, LayoutRegistries
from .xml_loader import XMLLoader, find_first

logger = logging.getLogger(__name__)

ROOT_TAG = "FinalOutput"
LAYOUTS_PATH = "Layouts/Layouts"
FIELDS_PATH = "Fields/Fields"


class CombinedExportOrchestrator:
    """
    Orquestador que maneja todo el flujo de parsing del export combinado.
    """

    def __init__(self, xml_source: Optional[str] = None):
        """
        Args:
            xml_source: Identificador del origen, usado en mensajes de error
        """
        self.loader = XMLLoader()
        self.xml_source = xml_source

    def locate_sections(self, root: ET.Element) -> Tuple[ET.Element, Optional[ET.Element]]:
        """
        Finds the layout section and the optional field schema section.

        Raises:
            MissingRootError: no <FinalOutput> in the document
            MissingLayoutDataError: no <Layouts><Layouts> inside it
        """
        final_output = root if root.tag == ROOT_TAG else find_first(root, ROOT_TAG)
        if final_output is None:
            raise MissingRootError(xml_source=self.xml_source)

        layout_node = find_first(final_output, LAYOUTS_PATH)
        if layout_node is None:
            raise MissingLayoutDataError(xml_source=self.xml_source)

        return layout_node, find_first(final_output, FIELDS_PATH)

    def parse(self, xml_text: str) -> CombinedResult:
        """
        Parsea el export combinado completo.

        Args:
            xml_text: Contenido XML crudo

        Returns:
            CombinedResult con todos los registros

        Raises:
            XmlSyntaxError, MissingRootError, MissingLayoutDataError
        """
        root = self.loader.load_from_string(xml_text, self.xml_source)
        layout_node, fields_node = self.locate_sections(root)

        registries = parse_layouts(layout_node, LayoutRegistries())
        if fields_node is not None:
            db_fields = parse_field_schema(fields_node)
        else:
            logger.info("No <Fields> section found, database field registry left empty")
            db_fields = {}

        return CombinedResult(
            fields=MappingProxyType(registries.fields),
            profiles=MappingProxyType(registries.profiles),
            cards=MappingProxyType(registries.cards),
            buttons=MappingProxyType(registries.buttons),
            db_fields=MappingProxyType(db_fields),
            skipped_layouts=registries.skipped_layouts,
        )


def parse_combined(xml_text: str, xml_source: Optional[str] = None) -> CombinedResult:
    """Función de conveniencia: parsea un export combinado en una sola llamada."""
    return CombinedExportOrchestrator(xml_source=xml_source).parse(xml_text)
