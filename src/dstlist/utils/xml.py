"""XML helpers: document parsing and service error detection."""

import xml.etree.ElementTree as ET
from typing import List, Optional

from dstlist.errors import MalformedResponse, ServiceError
from dstlist.utils.logging import get_logger

logger = get_logger(__name__)


def parse_document(text: str) -> ET.Element:
    """Parse response text into its root element, or raise MalformedResponse."""
    if text is None or not text.strip():
        raise MalformedResponse("Empty response payload")
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedResponse(f"Response is not well-formed XML: {e}") from e


def _collect_errors(root: ET.Element) -> List[ET.Element]:
    if root.tag == "error":
        return [root]
    return list(root.iter("error"))


def check_for_errors(text: str) -> str:
    """
    Raise if the payload is an error document, otherwise return it unchanged.

    An error document has an ``<error>`` root, or ``<error>`` elements under
    the root (usually ``<data><errors><error>...``). The optional ``code``
    attribute of the first error is kept on the raised exception.

    Raises:
        ServiceError: The service reported one or more errors
        MalformedResponse: The payload is not well-formed XML
    """
    root = parse_document(text)
    errors = _collect_errors(root)
    if not errors:
        return text

    messages = [(e.text or "").strip() for e in errors]
    code: Optional[str] = None
    for e in errors:
        code = e.get("code") or code
        if code:
            break
    logger.warning(f"Service reported {len(errors)} error(s): {'; '.join(m for m in messages if m)}")
    raise ServiceError(messages, code=code)
