"""Whitespace-sensitive re-indentation of compiled documents."""

import re
from html.parser import HTMLParser
from typing import List, Tuple

# Elements whose surrounding whitespace doesn't render (default CSS display)
BLOCK_TAGS = {
    "address",
    "article",
    "aside",
    "blockquote",
    "body",
    "dd",
    "details",
    "dialog",
    "div",
    "dl",
    "dt",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "hr",
    "html",
    "li",
    "link",
    "main",
    "meta",
    "nav",
    "ol",
    "p",
    "pre",
    "script",
    "section",
    "style",
    "summary",
    "table",
    "tbody",
    "td",
    "template",
    "tfoot",
    "th",
    "thead",
    "title",
    "tr",
    "ul",
}

# Content kept byte for byte
VERBATIM_TAGS = {"pre", "script", "style", "textarea"}

VOID_TAGS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

_TAG_NAME_RE = re.compile(r"<\s*([^\s/>]+)")


class _Formatter(HTMLParser):
    """Re-emits a document, breaking lines only between two block boundaries.

    Text, inline elements and whitespace next to them are copied unchanged.
    Tag names keep their original case.
    """

    def __init__(self, indent: str = "  ") -> None:
        super().__init__(convert_charrefs=False)
        self.indent = indent
        self.parts: List[str] = []
        self._pending = ""
        self._prev_block = True  # document start counts as a boundary
        self._stack: List[Tuple[str, str]] = []  # (lowercase, original) names
        self._verbatim = 0

    def result(self) -> str:
        self.close()
        self.parts.append(self._pending)
        self._pending = ""
        html = "".join(self.parts)
        return html if html.endswith("\n") else html + "\n"

    def _emit_tag(self, raw: str, block: bool, depth: int) -> None:
        if block and self._prev_block and not self._verbatim:
            # Whitespace-only gap between block boundaries: safe to replace
            if self.parts:
                self.parts.append("\n")
            self.parts.append(self.indent * depth)
        else:
            self.parts.append(self._pending)
        self._pending = ""
        self.parts.append(raw)
        self._prev_block = block

    def _emit_text(self, text: str) -> None:
        self.parts.append(self._pending)
        self._pending = ""
        self.parts.append(text)
        self._prev_block = False

    def handle_starttag(self, tag, attrs):
        raw = self.get_starttag_text() or f"<{tag}>"
        self._emit_tag(raw, tag in BLOCK_TAGS, len(self._stack))
        if tag in VOID_TAGS:
            return
        match = _TAG_NAME_RE.match(raw)
        self._stack.append((tag, match.group(1) if match else tag))
        if tag in VERBATIM_TAGS:
            self._verbatim += 1

    def handle_startendtag(self, tag, attrs):
        raw = self.get_starttag_text() or f"<{tag} />"
        self._emit_tag(raw, tag in BLOCK_TAGS, len(self._stack))

    def handle_endtag(self, tag):
        name = tag
        depth = len(self._stack)
        matched = False
        for index in range(len(self._stack) - 1, -1, -1):
            if self._stack[index][0] == tag:
                name = self._stack[index][1]
                del self._stack[index:]
                depth = index
                matched = True
                break

        self._emit_tag(f"</{name}>", tag in BLOCK_TAGS, depth)
        if matched and tag in VERBATIM_TAGS and self._verbatim:
            self._verbatim -= 1

    def handle_data(self, data):
        if not self._verbatim and not data.strip():
            self._pending += data
            return
        self._emit_text(data)

    def handle_entityref(self, name):
        self._emit_text(f"&{name};")

    def handle_charref(self, name):
        self._emit_text(f"&#{name};")

    def handle_comment(self, data):
        self._emit_text(f"<!--{data}-->")

    def handle_decl(self, decl):
        self._emit_tag(f"<!{decl}>", True, 0)

    def handle_pi(self, data):
        self._emit_text(f"<?{data}>")

    def unknown_decl(self, data):
        self._emit_text(f"<![{data}]>")


def format_html(source: str) -> str:
    """Re-indent an HTML document without changing what it renders.

    Line breaks and indentation are only placed where a block-level tag
    meets another block-level tag across whitespace (or nothing). Text,
    phrasing content, custom element names and script/style/pre bodies are
    left exactly as they are.
    """
    formatter = _Formatter()
    formatter.feed(source)
    return formatter.result()
