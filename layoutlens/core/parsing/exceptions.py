"""
Excepciones del módulo de parsing.
Cada condición fatal lleva un mensaje fijo para el usuario.
"""
from typing import Optional


class LayoutExportError(Exception):
    """Base error for everything raised while reading a layout export."""

    default_message = "Unexpected error while processing the layout export."

    def __init__(self, message: Optional[str] = None, xml_source: Optional[str] = None):
        self.message = message or self.default_message
        self.xml_source = xml_source
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.xml_source:
            return f"{self.message} (source: {self.xml_source})"
        return self.message


class XmlSyntaxError(LayoutExportError):
    """The outer document is not well-formed XML."""

    default_message = (
        "XML parsing error. Please ensure the file content is valid "
        "and was copied correctly."
    )


class MissingRootError(LayoutExportError):
    """No <FinalOutput> container in the document."""

    default_message = (
        "The root <FinalOutput> tag was not found. The SQL query may have "
        "failed or produced an unexpected result."
    )


class MissingLayoutDataError(LayoutExportError):
    """No <Layouts><Layouts> section inside <FinalOutput>."""

    default_message = (
        "Could not find <Layouts> data within <FinalOutput>. "
        "Please check the generated XML."
    )


class UnsupportedTaskError(LayoutExportError):
    default_message = "Unsupported task."

    def __init__(self, task: Optional[str]):
        self.task = task
        super().__init__(f"Unsupported task: {task!r}")
