"""
XPath-based node selection.

Uses the ElementTree path subset. Expressions are evaluated from a
document node that wraps the root element, so ``.//img`` matches the
root element too and ``./catalog/img`` starts at the document.
"""

from __future__ import annotations

from typing import Iterator
from xml.etree import ElementTree as ET

from xmlimg.storage.schema import InputFileError, InvalidXPathError, MalformedXMLError

from .base import ImageNode

# Name pattern for nodes without a name attribute
SYNTHETIC_NAME = "img_{:04d}"

_DOCUMENT_TAG = "#document"


def load_document(filename: str) -> ET.Element:
    """
    Parse an XML file fully into memory.

    Returns:
        A document element whose only child is the parsed root

    Raises:
        InputFileError: If the file cannot be read
        MalformedXMLError: If the file is not well-formed XML
    """
    try:
        tree = ET.parse(filename)
    except ET.ParseError as e:
        raise MalformedXMLError(f"{filename}: {e}") from e
    except OSError as e:
        raise InputFileError(f"Cannot read {filename}: {e}") from e

    document = ET.Element(_DOCUMENT_TAG)
    document.append(tree.getroot())
    return document


def normalize_xpath(xpath: str) -> str:
    """Make absolute expressions relative to the document node."""
    xpath = xpath.strip()
    if xpath.startswith("/"):
        return "." + xpath
    return xpath


def find_nodes(document: ET.Element, xpath: str) -> list[ET.Element]:
    """
    Evaluate a path expression in document order.

    Raises:
        InvalidXPathError: If ElementTree rejects the expression
    """
    try:
        return document.findall(normalize_xpath(xpath))
    except (SyntaxError, KeyError, TypeError, ValueError) as e:
        raise InvalidXPathError(f"Invalid XPath {xpath!r}: {e}") from e


def to_image_node(element: ET.Element, index: int, data_attr: str, name_attr: str) -> ImageNode:
    """Read the payload and name attributes of one matched element."""
    name = element.get(name_attr) or SYNTHETIC_NAME.format(index)
    return ImageNode(
        index=index,
        tag=element.tag,
        data=element.get(data_attr),
        name=name,
    )


def iter_image_nodes(
    filename: str,
    xpath: str,
    data_attr: str,
    name_attr: str,
) -> Iterator[ImageNode]:
    """
    Load a file and yield an ImageNode per matching element.

    The document is parsed and the expression evaluated before the first
    node is yielded, so fatal errors surface on the first ``next()``.
    """
    document = load_document(filename)
    for i, element in enumerate(find_nodes(document, xpath)):
        yield to_image_node(element, i, data_attr, name_attr)
