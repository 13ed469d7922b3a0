"""
Structural conversion from the tag encoding (TSX) to a key-value tree.

This is a purely STRUCTURAL translation: it knows nothing about
tilesets. Field meaning is applied later by the model.

=============================================================================
CONVERSION RULES
=============================================================================

    <tileset name="terrain" tilewidth="32">        {"tileset": [{
        <image source="t.png" width="64"/>             "name": "terrain",
        <tile id="0">                                  "tilewidth": "32",
            <animation>                                "image": [{"source": "t.png",
                <frame tileid="0" duration="100"/>               "width": "64"}],
                <frame tileid="1" duration="100"/>     "tile": [{"id": "0",
            </animation>                                   "animation": [{"frame": [
        </tile>                                                {"tileid": "0", ...},
    </tileset>                                                 {"tileid": "1", ...}]}]}]
                                                        }]}

1. The root element becomes a single-element list under its tag.
2. Attributes become string values (no type guessing).
3. Every child element is appended to a list under its tag, so a child
   that appears once is a single-element list.
4. Non-whitespace text content is kept under "#text".
=============================================================================
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict

from .errors import ConversionError


TEXT_KEY = "#text"


def _element_to_record(elem: ET.Element) -> Dict[str, Any]:
    record: Dict[str, Any] = dict(elem.attrib)

    for child in elem:
        children = record.setdefault(child.tag, [])
        if not isinstance(children, list):
            raise ConversionError(
                f"<{elem.tag}> has both an attribute and a child element named {child.tag!r}"
            )
        children.append(_element_to_record(child))

    if elem.text and elem.text.strip():
        record[TEXT_KEY] = elem.text

    return record


def to_keyvalue_tree(text: str) -> Dict[str, Any]:
    """
    Convert tag-encoded text into a key-value tree.

    Raises:
    -------
    ConversionError : If the markup is malformed (unbalanced tags, bad
                      characters, no root element, ...)
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as err:
        line, col = err.position
        raise ConversionError(f"malformed markup: {err}", line=line, col=col) from err

    try:
        return {root.tag: [_element_to_record(root)]}
    except RecursionError:
        raise ConversionError("markup is nested too deeply") from None
