"""
XML tree helpers.

Every repeatable GPX child is exposed as an ordered list (possibly
empty, never None) so the rest of the package never has to tell a
single child from many. Elements are matched by local name, which
makes GPX 1.0, GPX 1.1 and namespace-less documents look the same.
"""

from typing import List, Optional
from xml.etree.ElementTree import Element


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def children(node: Optional[Element], name: str) -> List[Element]:
    """Direct children of ``node`` called ``name``, in document order."""
    if node is None:
        return []
    return [child for child in node if local_name(child.tag) == name]


def child_text(node: Optional[Element], name: str) -> Optional[str]:
    """Stripped text of the first ``name`` child, or None if absent/blank."""
    for child in children(node, name):
        text = (child.text or "").strip()
        return text or None
    return None
