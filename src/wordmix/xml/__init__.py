"""XML document shuffling."""

from wordmix.xml.documents import (
    parse_document,
    shuffle_document_text_values,
    shuffle_xml_file,
    shuffle_xml_string,
)

__all__ = [
    "parse_document",
    "shuffle_document_text_values",
    "shuffle_xml_file",
    "shuffle_xml_string",
]
