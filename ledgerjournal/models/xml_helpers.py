"""Helpers for reading elements out of ledger's XML report."""

from xml.etree.ElementTree import Element

from ledgerjournal.errors import MalformedXmlError


def require(node: Element, path: str) -> Element:
    """Return the element at path below node, or fail naming the path."""
    found = node.find(path)
    if found is None:
        raise MalformedXmlError(f"<{node.tag}> has no {path} element")
    return found


def require_text(node: Element, path: str) -> str:
    return require(node, path).text or ""


def parse_metadata(node: Element) -> dict[str, str]:
    """Read metadata/value entries (key attribute, string child) in order."""
    metadata = {}
    for value in node.findall("metadata/value"):
        key = value.get("key")
        if key is None:
            raise MalformedXmlError(f"<{node.tag}> has a metadata value without key")
        metadata[key] = value.findtext("string", default="")
    return metadata
