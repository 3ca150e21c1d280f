"""
XML to JSON-like structure decoding.

Decoding options are fixed: an element that occurs once decodes to its bare
value (repeated siblings become a list), attributes are dropped, and text is
never coerced to numbers or booleans. Leaf text is kept exactly as sent,
surrounding whitespace included; whitespace-only text between child elements
is indentation and is dropped.
"""
from typing import Any, Dict, Optional, Tuple, Union

import xmltodict

from soapbridge.core.errors import ParsingError

TEXT_KEY = '#text'


def _postprocess(path, key: str, value: Any) -> Optional[Tuple[str, Any]]:
    # Indentation between children lands under TEXT_KEY
    if key == TEXT_KEY and isinstance(value, str) and not value.strip():
        return None
    # <item/> decodes to "" rather than None
    if value is None:
        return key, ""
    return key, value


def decode_xml(xml: Union[str, bytes]) -> Dict[str, Any]:
    """
    Decode a well-formed XML document into nested dicts, lists and strings.

    Args:
        xml: XML document as text or bytes

    Returns:
        Decoded document, keyed by the root element name

    Raises:
        ParsingError: If the input is not a string or is not well-formed XML
    """
    if not isinstance(xml, (str, bytes)):
        raise ParsingError(f"expected an XML string, got {type(xml).__name__}")

    try:
        return xmltodict.parse(
            xml,
            xml_attribs=False,
            strip_whitespace=False,
            cdata_key=TEXT_KEY,
            dict_constructor=dict,
            postprocessor=_postprocess
        )
    except Exception as e:
        raise ParsingError(e) from e
