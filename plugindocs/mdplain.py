"""Naive conversion of Markdown to plain text."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token

# Bare "www." links become autolinks whose URL carries an http:// prefix.
_WWW_LINK = re.compile(r"(?<![^\s*_~(])www\.(?=[A-Za-z0-9])")


def is_relative_link(link: str) -> bool:
    """Whether link is a fragment, a root path or a site-relative path."""
    if not link:
        return False
    if link[0] == "#":
        return True
    # "//" may start a protocol-relative link.
    if len(link) >= 2 and link[0] == "/" and link[1] != "/":
        return True
    return link == "/"


def _linkify(text: str) -> str:
    return _WWW_LINK.sub("http://www.", text)


def _inline_text(tokens: Optional[Sequence[Token]]) -> str:
    parts = []
    for token in tokens or ():
        if token.type in ("text", "code_inline"):
            parts.append(token.content)
        elif token.type == "text_special":
            parts.append(token.markup)
        elif token.type == "image":
            parts.append(_inline_text(token.children))
    return "".join(parts)


def _closing(tokens: Sequence[Token], start: int) -> int:
    opening = tokens[start]
    close_type = opening.type[: -len("_open")] + "_close"
    for index in range(start + 1, len(tokens)):
        token = tokens[index]
        if token.type == close_type and token.level == opening.level:
            return index
    return len(tokens) - 1


class _Output:
    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def write(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def double_space(self) -> None:
        if self._length > 0:
            self.write("\n")

    def value(self) -> str:
        return "".join(self._parts)


class TextRenderer:
    """Renders a markdown-it token stream as plain text."""

    def render(self, tokens: Sequence[Token], source: str) -> str:
        """Return the plain text of tokens parsed from source."""
        out = _Output()
        index = 0
        while index < len(tokens):
            token = tokens[index]
            kind = token.type

            if kind == "heading_open":
                out.double_space()
                out.write(_inline_text(tokens[index + 1].children))
                index = _closing(tokens, index) + 1
                continue

            if kind == "blockquote_open":
                out.double_space()
                end = _closing(tokens, index)
                out.write(
                    "".join(
                        _inline_text(inner.children)
                        for inner in tokens[index + 1 : end]
                        if inner.type == "inline"
                    )
                )
                index = end + 1
                continue

            if kind == "hr":
                out.double_space()
            elif kind == "code_block":
                out.double_space()
                out.write(token.content)
            elif kind == "fence":
                out.double_space()
                out.double_space()
                out.write(token.content)
            elif kind in ("bullet_list_open", "ordered_list_open"):
                out.double_space()
            elif kind == "paragraph_open" and not token.hidden:
                out.double_space()
                inline = tokens[index + 1]
                if _inline_text(inline.children).startswith("|"):
                    # Tables are written as they stand.
                    out.write(self._raw_lines(token, inline, source))
                    index = _closing(tokens, index) + 1
                    continue
            elif kind == "inline":
                self._render_inline(token.children or [], out)

            index += 1
        return out.value()

    @staticmethod
    def _raw_lines(paragraph: Token, inline: Token, source: str) -> str:
        if paragraph.map and paragraph.level == 0:
            start, end = paragraph.map
            lines = source.splitlines(keepends=True)[start:end]
        else:
            lines = inline.content.splitlines(keepends=True)
        if not lines:
            return ""
        stripped = [line.lstrip(" \t") for line in lines]
        stripped[-1] = stripped[-1].rstrip()
        return "".join(stripped)

    def _render_inline(self, children: Sequence[Token], out: _Output) -> None:
        index = 0
        while index < len(children):
            token = children[index]
            kind = token.type

            if kind == "link_open":
                end = _closing(children, index)
                label = _inline_text(children[index + 1 : end])
                out.write(label)
                if token.markup != "autolink":
                    href = str(token.attrGet("href") or "")
                    if href and not is_relative_link(href):
                        out.write(" " + href)
                index = end + 1
                continue

            if kind == "text":
                out.write(_linkify(token.content))
            elif kind == "text_special":
                out.write(token.markup)
            elif kind == "code_inline":
                out.write(token.content)
            elif kind == "softbreak":
                out.double_space()
            index += 1


def _parser() -> MarkdownIt:
    md = MarkdownIt("commonmark")
    # Keep escapes and entities as written rather than merged into decoded text.
    md.disable("text_join", ignoreInvalid=True)
    return md


def plain_markdown(markdown: str) -> str:
    """Run a very naive cleanup of Markdown so it reads as plain text."""
    tokens = _parser().parse(markdown)
    return TextRenderer().render(tokens, markdown)