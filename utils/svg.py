"""
SVG parsing — reads icon markup into a plain SvgNode tree.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from errors import ExtractionError
from models.schemas import SvgNode

log = logging.getLogger(__name__)

# Elements that carry no geometry; the generated component renders its own title.
SKIPPED_TAGS = {"title", "desc", "metadata"}

_KNOWN_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
}


def _parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
    )


def _attribute_name(qualified: str) -> str | None:
    """Markup name of an attribute, or None for editor namespaces (sodipodi, inkscape, ...)."""
    qname = etree.QName(qualified)
    if qname.namespace is None:
        return qname.localname
    prefix = _KNOWN_PREFIXES.get(qname.namespace)
    return f"{prefix}:{qname.localname}" if prefix else None


def _to_node(element: etree._Element) -> SvgNode:
    attributes = {}
    for key, value in element.attrib.items():
        name = _attribute_name(key)
        if name is None:
            log.debug("Dropping foreign attribute %s", key)
            continue
        attributes[name] = value
    node = SvgNode(tag=etree.QName(element).localname, attributes=attributes)
    text = (element.text or "").strip()
    if text:
        node.text = text
    for child in element:
        if not isinstance(child.tag, str):
            continue
        if etree.QName(child).localname in SKIPPED_TAGS:
            continue
        child_node = _to_node(child)
        tail = (child.tail or "").strip()
        if tail:
            child_node.tail = tail
        node.children.append(child_node)
    return node


def parse_svg(markup: bytes | str, source: str = "<string>") -> SvgNode:
    """Parse SVG markup; the root element must be <svg>."""
    if isinstance(markup, str):
        markup = markup.encode("utf-8")
    try:
        root = etree.fromstring(markup, parser=_parser())
    except etree.XMLSyntaxError as e:
        raise ExtractionError(f"{source}: malformed SVG: {e}") from e
    if root is None or etree.QName(root).localname != "svg":
        raise ExtractionError(f"{source}: root element is not <svg>")
    return _to_node(root)


def parse_svg_file(path: Path) -> SvgNode:
    try:
        markup = path.read_bytes()
    except OSError as e:
        raise ExtractionError(f"{path}: could not read file: {e}") from e
    return parse_svg(markup, source=str(path))
