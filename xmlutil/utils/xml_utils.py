#!/usr/bin/env python3
"""
XML document access utilities.

Parses XML into a minidom Document, serializes it back, looks up element
text by parent/child tag name and replaces element text in place.

Two failure tiers:
- parse/serialize faults are logged at ERROR and returned as a failed
  XmlResult (or None from the fail-soft wrappers), never raised;
- missing tags are logged at DEBUG and yield "" or [].
"""

import io
import logging
from typing import BinaryIO, List, Optional, TextIO, Union
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from ..config import DEFAULT_ENCODING
from ..models import FailureReason, NotATextNodeError, XmlResult

logger = logging.getLogger(__name__)

XmlSource = Union[BinaryIO, TextIO, bytes, bytearray, str]


def _fail(reason: FailureReason, what: str, error) -> XmlResult:
    logger.error("%s: %s", what, error)
    return XmlResult.failed(reason, str(error))


def _read_source(source: XmlSource) -> Union[bytes, str]:
    """Drain a stream (or accept a buffer) into a single bytes/str value."""
    data = source.read() if hasattr(source, "read") else source
    if isinstance(data, bytearray):
        return bytes(data)
    if not isinstance(data, (bytes, str)):
        raise TypeError(f"Cannot read XML from {type(data).__name__}")
    return data


# ─── Parsing ───────────────────────────────────────────────

def parse_document_result(source: XmlSource) -> XmlResult:
    """
    Parse XML from a stream or buffer into a Document.

    The stream is read to the end and is not closed; the caller owns it.
    Adjacent text nodes of the resulting tree are merged.

    Args:
        source: Readable binary/text stream, or bytes/str holding XML

    Returns:
        XmlResult whose value is the Document, or a failure reason
    """
    try:
        data = _read_source(source)
        doc = minidom.parseString(data)
        doc.documentElement.normalize()
    except ExpatError as e:
        return _fail(FailureReason.PARSE_ERROR, "Error creating document from input stream", e)
    except (LookupError, UnicodeError) as e:
        return _fail(FailureReason.ENCODING_ERROR, "Unsupported encoding", e)
    except OSError as e:
        return _fail(FailureReason.IO_ERROR, "Error reading input stream", e)
    except Exception as e:
        logger.error("Unexpected error creating document: %s", e, exc_info=True)
        return XmlResult.failed(FailureReason.PARSE_ERROR, str(e))
    return XmlResult.success(doc)


def parse_document(source: XmlSource) -> Optional[minidom.Document]:
    """Parse XML into a Document, returning None on any failure."""
    return parse_document_result(source).value_or(None)


def document_from_string_result(text: str) -> XmlResult:
    """
    Convert an XML string into a Document.

    The text is encoded as UTF-8 and parsed from an in-memory byte stream
    that is released on every exit path.
    """
    if not isinstance(text, str):
        logger.error("Error converting string to XML: expected str, got %s", type(text).__name__)
        return XmlResult.failed(FailureReason.PARSE_ERROR, f"expected str, got {type(text).__name__}")
    try:
        data = text.encode(DEFAULT_ENCODING)
    except UnicodeEncodeError as e:
        return _fail(FailureReason.ENCODING_ERROR, "Unsupported encoding", e)

    with io.BytesIO(data) as stream:
        return parse_document_result(stream)


def document_from_string(text: str) -> Optional[minidom.Document]:
    """Convert an XML string into a Document, or None on failure."""
    return document_from_string_result(text).value_or(None)


def parse_document_file_result(path: str) -> XmlResult:
    """Parse an XML file from disk. The file is always closed afterwards."""
    try:
        stream = open(path, 'rb')
    except OSError as e:
        return _fail(FailureReason.IO_ERROR, f"Cannot open {path}", e)

    with stream:
        return parse_document_result(stream)


def parse_document_file(path: str) -> Optional[minidom.Document]:
    return parse_document_file_result(path).value_or(None)


# ─── Serialization ─────────────────────────────────────────

def serialize_document_result(node: minidom.Node) -> XmlResult:
    """
    Serialize a Document (or any DOM node) into its XML text.

    Returns:
        XmlResult whose value is the XML string, or TRANSFORM_ERROR
    """
    if not isinstance(node, minidom.Node):
        logger.error("Error converting XML to String: not a DOM node (%s)", type(node).__name__)
        return XmlResult.failed(FailureReason.TRANSFORM_ERROR,
                                f"not a DOM node: {type(node).__name__}")
    try:
        return XmlResult.success(node.toxml())
    except Exception as e:
        return _fail(FailureReason.TRANSFORM_ERROR, "Error converting XML to String", e)


def serialize_document(node: minidom.Node) -> Optional[str]:
    """Serialize a Document into XML text, or None on failure."""
    return serialize_document_result(node).value_or(None)


# ─── Lookups ───────────────────────────────────────────────

def _first_child_value(element: minidom.Element) -> Optional[str]:
    """None when the element has no children; "" when the first child is not text."""
    child = element.firstChild
    if child is None:
        return None
    return child.nodeValue or ""


def first_element_value(doc: Optional[minidom.Document], parent_tag: str, element_tag: str) -> str:
    """
    Return the text of the first ``element_tag`` under a ``parent_tag``.

    Every ``parent_tag`` element is visited in document order and the
    result is overwritten each time, so when several parents match the
    value comes from the last one. ``element_tag`` is searched across the
    parent's whole subtree, not only its direct children.

    A parent without a usable ``element_tag`` (missing, or with no
    children at all) ends the scan; whatever was found before it is
    returned. A first child that is an element counts as "". Returns ""
    when nothing was found.
    """
    value = ""
    if doc is None:
        logger.debug("Element tag doesn't exist: %s", element_tag)
        return value

    parents = doc.getElementsByTagName(parent_tag)
    if not parents:
        logger.debug("Parent tag doesn't exist: %s", parent_tag)
        return value

    for parent in parents:
        matches = parent.getElementsByTagName(element_tag)
        found = _first_child_value(matches[0]) if matches else None
        if found is None:
            logger.debug("Element tag doesn't exist: %s", element_tag)
            break
        value = found

    return value


def element_values(doc: Optional[minidom.Document], parent_tag: str, element_tag: str) -> List[str]:
    """
    Return the text of every ``element_tag`` under every ``parent_tag``.

    Values are collected in encounter order across all parents. An
    ``element_tag`` with no children ends the scan and the values
    collected so far are returned. A first child that is an element
    contributes "" and the scan goes on.
    """
    values: List[str] = []
    if doc is None:
        logger.debug("Element tag doesn't exist: %s", element_tag)
        return values

    parents = doc.getElementsByTagName(parent_tag)
    if not parents:
        logger.debug("Parent tag doesn't exist: %s", parent_tag)
        return values

    for parent in parents:
        for element in parent.getElementsByTagName(element_tag):
            found = _first_child_value(element)
            if found is None:
                logger.debug("Element tag doesn't exist: %s", element_tag)
                return values
            values.append(found)

    return values


def get_first_element_value(source: XmlSource, parent_tag: str, element_tag: str) -> str:
    """Parse ``source`` and return :func:`first_element_value` over it."""
    return first_element_value(parse_document(source), parent_tag, element_tag)


def get_element_values(source: XmlSource, parent_tag: str, element_tag: str) -> List[str]:
    """Parse ``source`` and return :func:`element_values` over it."""
    return element_values(parse_document(source), parent_tag, element_tag)


# ─── Mutation ──────────────────────────────────────────────

def replace_node_text(doc: Optional[minidom.Document], tag: str,
                      replacement: str) -> Optional[minidom.Document]:
    """
    Replace the text of every ``tag`` element in place.

    The document passed in is mutated and returned as-is. None is passed
    through untouched.

    Raises:
        NotATextNodeError: a matched element has no first child or its
            first child is not a text node. Nothing is modified.
    """
    if doc is None:
        return doc

    matches = doc.getElementsByTagName(tag)
    for node in matches:
        child = node.firstChild
        if not isinstance(child, minidom.Text):
            raise NotATextNodeError(tag, type(child).__name__ if child is not None else None)

    for node in matches:
        node.firstChild.data = replacement

    return doc
