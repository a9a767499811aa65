"""
Carga XML desde string sin conocer estructura.
El export externo falla temprano; las definiciones de layout embebidas nunca
lanzan excepción. Los namespaces se eliminan al cargar.
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Optional
import logging

from .exceptions import XmlSyntaxError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NestedParseOutcome:
    """Result of parsing one embedded layout definition."""
    root: Optional[ET.Element] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.root is not None


class XMLLoader:
    """
    Cargador agnóstico de XML.
    No interpreta nodos, solo carga y valida formato básico.
    """

    @staticmethod
    def load_from_string(xml_string: str,
                         xml_source: Optional[str] = None) -> ET.Element:
        """
        Carga XML desde string.

        Args:
            xml_string: String con contenido XML
            xml_source: Identificador del origen para mensajes de error

        Returns:
            ElementTree root element

        Raises:
            XmlSyntaxError: Si el XML no es válido
        """
        try:
            root = strip_namespaces(ET.fromstring(xml_string))
        except (ET.ParseError, ValueError, TypeError) as e:
            logger.warning(f"Invalid XML string: {str(e)}")
            raise XmlSyntaxError(xml_source=xml_source) from e

        logger.info("XML loaded successfully from string")
        return root

    @staticmethod
    def try_load_from_string(xml_string: Optional[str]) -> NestedParseOutcome:
        """
        Parses an embedded document without raising.

        Empty content is reported as a failed outcome, same as malformed markup.
        """
        if not xml_string:
            return NestedParseOutcome(error="empty content")

        try:
            return NestedParseOutcome(root=strip_namespaces(ET.fromstring(xml_string)))
        except (ET.ParseError, ValueError) as e:
            return NestedParseOutcome(error=str(e))


def local_name(tag: str) -> str:
    """``{urn:x}section`` -> ``section``."""
    return tag.rsplit("}", 1)[-1]


def strip_namespaces(root: ET.Element) -> ET.Element:
    """
    Reduces every tag to its local name, in place.

    Lookups are by local name, so a layout declaring ``xmlns="..."`` reads
    the same as one without it.
    """
    for node in root.iter():
        if isinstance(node.tag, str) and "}" in node.tag:
            node.tag = local_name(node.tag)
    return root


def text_content(element: Optional[ET.Element]) -> Optional[str]:
    """Concatenated text of the element and all its descendants."""
    if element is None:
        return None
    return "".join(element.itertext())


def find_first(element: ET.Element, path: str) -> Optional[ET.Element]:
    """
    First descendant matching ``path`` in document order.

    ``path`` is an ElementPath relative to any depth, e.g. ``text/lang``
    matches a <lang> whose parent is a <text> anywhere below ``element``.
    """
    return element.find(f".//{path}")


def iter_descendants(element: ET.Element, tag: str,
                     include_self: bool = False) -> Iterator[ET.Element]:
    """Elements named ``tag`` below ``element`` in document order."""
    for node in element.iter(tag):
        if node is element and not include_self:
            continue
        yield node
