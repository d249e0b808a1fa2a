"""
xmlutil - read element text out of XML documents and substitute it in place.
"""

from .config import APP_NAME, APP_VERSION
from .models import FailureReason, XmlResult, XmlUtilError, NotATextNodeError
from .utils import (
    parse_document, parse_document_result,
    document_from_string, document_from_string_result,
    parse_document_file, parse_document_file_result,
    serialize_document, serialize_document_result,
    first_element_value, element_values,
    get_first_element_value, get_element_values,
    replace_node_text,
    setup_logging,
)

__version__ = APP_VERSION
