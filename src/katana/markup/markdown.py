"""Markup tree walker rendering HTML into markdown-flavoured text."""

import html as html_lib
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import NavigableString, PreformattedString, Tag

from ..core.abc import TagHandler

# Elements whose content never reaches the output
IGNORED_TAGS = {"script", "style", "head", "noscript", "template"}

BLOCK_TAGS = {
    "p", "div", "section", "article", "header", "footer", "aside", "main",
    "blockquote", "ul", "ol", "li", "dl", "dt", "dd", "table", "tr",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "figure", "figcaption",
}


class MarkupError(Exception):
    """Exception raised when markup cannot be parsed."""
    pass


class StructuredPrinter:
    """Output builder shared by all tag handlers during one walk."""

    def __init__(self):
        self.parent_chain: List[str] = []   # names of the open ancestor elements
        self._chunks: List[str] = []

    def append_str(self, text: str) -> None:
        self._chunks.append(text)

    def insert_newline(self) -> None:
        self._chunks.append("\n")

    @property
    def text(self) -> str:
        return "".join(self._chunks)


class CodeHandler:
    """
    Fences code elements.

    <pre> opens a paragraph-separated fenced block, <code> and <samp> an
    inline span. A <code> directly inside <pre> is already fenced and is
    left alone.
    """

    def __init__(self):
        self.code_type = ""
        self.nested = False

    def enter(self, tag: Tag, printer: StructuredPrinter) -> None:
        self.code_type = tag.name
        immediate_parent = printer.parent_chain[-1] if printer.parent_chain else None
        self.nested = self.code_type == "code" and immediate_parent == "pre"
        self._handle(printer, start=True)

    def exit(self, printer: StructuredPrinter) -> None:
        self._handle(printer, start=False)

    def _handle(self, printer: StructuredPrinter, start: bool) -> None:
        if self.nested:
            return

        if self.code_type == "pre":
            if start:
                printer.insert_newline()
            printer.append_str("\n```\n")
            if not start:
                printer.insert_newline()
        elif self.code_type in ("code", "samp"):
            printer.append_str("`")


class BlockHandler:
    """Surrounds block elements with paragraph breaks."""

    def enter(self, tag: Tag, printer: StructuredPrinter) -> None:
        printer.append_str("\n\n")

    def exit(self, printer: StructuredPrinter) -> None:
        printer.append_str("\n\n")


class LineBreakHandler:

    def enter(self, tag: Tag, printer: StructuredPrinter) -> None:
        printer.insert_newline()

    def exit(self, printer: StructuredPrinter) -> None:
        pass


HandlerFactory = Callable[[], TagHandler]


def default_handlers(fence_code: bool = True) -> Dict[str, HandlerFactory]:
    """
    Build the tag-name to handler-factory table.

    Args:
        fence_code: Whether pre/code/samp are rendered as markdown code

    Returns:
        Dict[str, HandlerFactory]: A fresh handler is created per element
    """
    handlers: Dict[str, HandlerFactory] = {name: BlockHandler for name in BLOCK_TAGS}
    handlers["br"] = LineBreakHandler
    if fence_code:
        for name in ("pre", "code", "samp"):
            handlers[name] = CodeHandler
    return handlers


def walk(node, printer: StructuredPrinter, handlers: Dict[str, HandlerFactory]) -> None:
    """Visit node and its descendants, calling enter/exit hooks on elements."""
    if isinstance(node, PreformattedString):
        # comments, doctypes, CDATA and processing instructions
        return
    if isinstance(node, NavigableString):
        # bs4 has decoded entities; escape again so the output stays markup
        printer.append_str(html_lib.escape(str(node), quote=False))
        return
    if not isinstance(node, Tag) or node.name in IGNORED_TAGS:
        return

    factory = handlers.get(node.name)
    handler = factory() if factory else None
    if handler:
        handler.enter(node, printer)

    printer.parent_chain.append(node.name)
    for child in node.children:
        walk(child, printer, handlers)
    printer.parent_chain.pop()

    if handler:
        handler.exit(printer)


def html_to_markdown(html: str, parser: str = "html.parser", fence_code: bool = True,
                     handlers: Optional[Dict[str, HandlerFactory]] = None) -> str:
    """
    Render HTML into text, fencing code and breaking paragraphs at blocks.

    Args:
        html: HTML document or fragment
        parser: BeautifulSoup tree builder name
        fence_code: Whether pre/code/samp are rendered as markdown code
        handlers: Optional handler table replacing default_handlers()

    Returns:
        str: Rendered markup; other tags are dropped, their text kept
            with "&", "<" and ">" escaped

    Raises:
        MarkupError: If the requested parser is not available
    """
    try:
        soup = BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise MarkupError(f"HTML parser '{parser}' is not available: {e}")

    if handlers is None:
        handlers = default_handlers(fence_code)

    printer = StructuredPrinter()
    for child in soup.children:
        walk(child, printer, handlers)
    return printer.text
