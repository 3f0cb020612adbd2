# src/vast_validator/dom/builder.py
import logging
from typing import Dict, List, Optional, Union

from lxml import etree

from vast_validator.dom.core import Attribute, Node
from vast_validator.errors import EmptyDocumentError, MalformedDocumentError

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strips the '{namespace}' prefix lxml puts on qualified names."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag


class _PendingNode:
    """Mutable stand-in for a Node while its end tag has not been seen yet."""

    __slots__ = ("name", "attrs", "runs", "current_run", "children")

    def __init__(self, name: str, attrs: List[Attribute]):
        self.name = name
        self.attrs = attrs
        self.runs: List[str] = []
        self.current_run: List[str] = []
        self.children: List[Node] = []

    def flush_text(self) -> None:
        """Closes the current text run, keeping it only if it has content."""
        if self.current_run:
            trimmed = "".join(self.current_run).strip()
            if trimmed:
                self.runs.append(trimmed)
            self.current_run = []

    def freeze(self) -> Node:
        self.flush_text()
        return Node(name=self.name, attrs=self.attrs, text=" ".join(self.runs), children=self.children)


class _TreeTarget:
    """
    lxml parser target that builds Node trees while the tokenizer streams.

    Comments and processing instructions are ignored because the target does
    not implement the corresponding callbacks.
    """

    def __init__(self):
        self.stack: List[_PendingNode] = []
        self.root: Optional[Node] = None
        self.started = False

    def start(self, tag: str, attrib: Dict[str, str], nsmap=None) -> None:
        self.started = True
        if self.stack:
            # Text before a child element ends the parent's current run
            self.stack[-1].flush_text()
        attrs = [(_local_name(key), value) for key, value in attrib.items()]
        self.stack.append(_PendingNode(_local_name(tag), attrs))

    def end(self, tag: str) -> None:
        if not self.stack:
            raise MalformedDocumentError(f"validator: unexpected closing tag {_local_name(tag)!r}")
        node = self.stack.pop().freeze()
        if self.stack:
            parent = self.stack[-1]
            parent.children.append(node)
        else:
            self.root = node

    def data(self, content: str) -> None:
        if self.stack:
            self.stack[-1].current_run.append(content)

    def close(self) -> Optional[Node]:
        if self.stack:
            raise MalformedDocumentError(
                f"validator: premature end of document, {len(self.stack)} element(s) still open"
            )
        return self.root


class TreeBuilder:
    """
    Builder responsible for parsing raw VAST XML into a generic Node tree.

    The parser is strict: anything the tokenizer rejects is reported as
    MalformedDocumentError, and no entities or external resources are loaded.
    """

    def parse(self, raw: Union[bytes, str]) -> Node:
        """
        Parses raw markup into the root Node.

        Args:
            raw: The XML document as bytes (preferred) or text.

        Returns:
            Node: The document root.

        Raises:
            EmptyDocumentError: Zero-length input, or no element content at all.
            MalformedDocumentError: Syntax errors, unexpected closing tags, truncated input.
        """
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        if not raw or not raw.strip():
            raise EmptyDocumentError()

        target = _TreeTarget()
        parser = etree.XMLParser(
            target=target,
            recover=False,
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
        )

        try:
            root = etree.fromstring(raw, parser)
        except etree.XMLSyntaxError as e:
            if not target.started and e.code == etree.ErrorTypes.ERR_DOCUMENT_EMPTY:
                # Only comments, PIs or stray text before any element
                raise EmptyDocumentError() from e
            line, column = e.position if e.position else (None, None)
            logger.debug("XML syntax error at %s:%s: %s", line, column, e)
            raise MalformedDocumentError(f"validator: parse XML: {e}", line=line, column=column) from e

        if root is None:
            raise EmptyDocumentError()

        logger.debug("Parsed document with root <%s> (%d children)", root.name, len(root.children))
        return root


def parse_document(raw: Union[bytes, str]) -> Node:
    """Convenience wrapper around TreeBuilder().parse()."""
    return TreeBuilder().parse(raw)
