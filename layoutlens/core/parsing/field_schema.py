"""
Extrae el esquema de campos de base de datos (<Fields><Fields>).
"""
from typing import Dict, List, Optional
import xml.etree.ElementTree as ET
import logging
import re

from .models import DbFieldRecord
from .xml_loader import find_first, iter_descendants, text_content

logger = logging.getLogger(__name__)

LOV_SEPARATOR = re.compile(r", ?")
MISSING_PART = "undefined"


def _child_text(field_node: ET.Element, tag: str) -> Optional[str]:
    return text_content(find_first(field_node, tag))


def parse_lovs(raw: Optional[str]) -> Optional[List[str]]:
    """Splits a LOVS value on a comma and one optional space; blank -> None."""
    if raw is None or not raw.strip():
        return None
    return LOV_SEPARATOR.split(raw.strip())


def column_name(table_name: Optional[str], field_name: Optional[str]) -> str:
    """``TABLE.FIELD``; a missing part is rendered as ``undefined``."""
    table = table_name if table_name is not None else MISSING_PART
    field = field_name if field_name is not None else MISSING_PART
    return f"{table}.{field}"


def parse_field_node(field_node: ET.Element) -> Optional[DbFieldRecord]:
    field_id = _child_text(field_node, "FIELDID")
    if not field_id:
        return None

    table_name = _child_text(field_node, "TABLENAME")
    field_name = _child_text(field_node, "FIELDNAME")

    return DbFieldRecord(
        field_id=field_id,
        label=_child_text(field_node, "LABEL"),
        field_type=_child_text(field_node, "FieldType"),
        length=_child_text(field_node, "LENGTH"),
        default_value=_child_text(field_node, "DEFAULTVALUE"),
        table_name=table_name,
        field_name=field_name,
        column_name=column_name(table_name, field_name),
        lovs=parse_lovs(_child_text(field_node, "LOVS")),
    )


def parse_field_schema(fields_root: ET.Element) -> Dict[str, DbFieldRecord]:
    """
    Builds the database field registry, keyed by FIELDID.

    Fields without a FIELDID are skipped; a repeated FIELDID keeps the last one.
    """
    data: Dict[str, DbFieldRecord] = {}
    for field_node in iter_descendants(fields_root, "Field"):
        record = parse_field_node(field_node)
        if record is not None:
            data[record.field_id] = record

    logger.info(f"Field schema processed: {len(data)} database fields")
    return data
