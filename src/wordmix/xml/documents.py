"""Shuffle the text content of XML documents.

Only text values change; tags, attributes, comments and processing
instructions are left as they are.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from random import Random

from lxml import etree

from wordmix.errors import DocumentParseError
from wordmix.statement import shuffle_statement

logger = logging.getLogger(__name__)


def _should_shuffle(value: str | None) -> bool:
    # Whitespace-only values are layout, not words
    return bool(value) and not value.isspace()


def shuffle_document_text_values(
    document: etree._ElementTree | etree._Element,
    shuffle_only_vowels: bool = False,
    separators: Iterable[str] | None = None,
    *,
    rng: Random | None = None,
) -> int:
    """Shuffle every text value of an XML document in place.

    Element text and tails are both rewritten with shuffle_statement. The
    root element's tail lies outside the document and is skipped, and so
    are values made only of whitespace, which hold layout rather than words.

    Args:
        document: Parsed lxml tree or element
        shuffle_only_vowels: Permute only the Latin vowels of each word
        separators: Word separator characters (defaults to a space)
        rng: Random source shared by every text value

    Returns:
        Number of text values rewritten
    """
    root = document.getroot() if isinstance(document, etree._ElementTree) else document
    separators = list(separators) if separators is not None else None
    rng = rng if rng is not None else Random()
    rewritten = 0

    for elem in root.iter():
        is_element = isinstance(elem.tag, str)
        if is_element and _should_shuffle(elem.text):
            elem.text = shuffle_statement(elem.text, shuffle_only_vowels, separators, rng=rng)
            rewritten += 1
        if elem is not root and _should_shuffle(elem.tail):
            elem.tail = shuffle_statement(elem.tail, shuffle_only_vowels, separators, rng=rng)
            rewritten += 1

    logger.debug("Shuffled %d text values in <%s>", rewritten, root.tag)
    return rewritten


def parse_document(xml: str | bytes) -> etree._ElementTree:
    """Parse an XML string into an lxml tree.

    Text strings are already decoded, so any encoding named in their XML
    declaration is ignored. Bytes are decoded as their declaration says.
    """
    parser = None
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
        parser = etree.XMLParser(encoding="utf-8")
    try:
        root = etree.fromstring(xml, parser)
    except etree.XMLSyntaxError as e:
        raise DocumentParseError(f"Invalid XML: {e}") from e
    return root.getroottree()


def shuffle_xml_string(
    xml: str | bytes,
    shuffle_only_vowels: bool = False,
    separators: Iterable[str] | None = None,
    *,
    rng: Random | None = None,
) -> str:
    """Parse, shuffle and serialize an XML document."""
    if isinstance(xml, str):
        has_declaration = xml.lstrip().startswith("<?xml")
    else:
        has_declaration = xml.lstrip().startswith(b"<?xml")
    tree = parse_document(xml)
    shuffle_document_text_values(tree, shuffle_only_vowels, separators, rng=rng)
    return etree.tostring(
        tree,
        encoding="utf-8",
        xml_declaration=has_declaration,
    ).decode("utf-8")


def shuffle_xml_file(
    path: Path,
    output: Path | None = None,
    shuffle_only_vowels: bool = False,
    separators: Iterable[str] | None = None,
    *,
    rng: Random | None = None,
) -> str:
    """Shuffle an XML file and write the result to output (if given).

    Returns:
        The shuffled document as a string
    """
    result = shuffle_xml_string(path.read_bytes(), shuffle_only_vowels, separators, rng=rng)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result, encoding="utf-8")
        logger.info("Wrote shuffled document to %s", output)
    return result
