import html
import re

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

CODE_BLOCK_RE = re.compile(r"<pre><code([^>]*)>(.*?)</code></pre>", re.DOTALL)

UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")


def strip_heading(content: str) -> str:
    _, _, body = content.partition("\n")
    return body


def code_block_text(rendered: str) -> str:
    """Literal text of a rendered code block, one trailing newline dropped."""
    text = html.unescape(rendered)
    return text[:-1] if text.endswith("\n") else text


def _add_copy_button(match: re.Match) -> str:
    literal = html.escape(code_block_text(match.group(2)), quote=True)
    return (
        '<div class="code-block">'
        f'<button type="button" class="copy-code" data-copy="{literal}">Copy</button>'
        f"{match.group(0)}"
        "</div>"
    )


class FencedCopyButtons(Preprocessor):
    """Adds a copy button to every stashed fenced code block.

    With raw HTML disabled the stash only ever holds fenced blocks, so
    indented code blocks, which are built later as plain elements, are left
    alone.
    """

    def run(self, lines):
        blocks = self.md.htmlStash.rawHtmlBlocks
        for index, block in enumerate(blocks):
            if isinstance(block, str):
                blocks[index] = CODE_BLOCK_RE.sub(_add_copy_button, block)
        return lines


class UnsafeLinkStripper(Treeprocessor):
    def run(self, root):
        for element in root.iter():
            for attr in ("href", "src"):
                value = element.get(attr)
                if value and value.strip().lower().startswith(UNSAFE_URL_SCHEMES):
                    del element.attrib[attr]


class GuideExtension(Extension):
    """Markdown as untrusted text: raw HTML is escaped, script URLs dropped."""

    def extendMarkdown(self, md):
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        # Runs right after fenced_code_block (priority 25)
        md.preprocessors.register(FencedCopyButtons(md), "fenced_copy_buttons", 24)
        md.treeprocessors.register(UnsafeLinkStripper(md), "unsafe_links", 1)


def render_content(content: str) -> str:
    """Render a section body (heading removed) to HTML.

    Returns an empty string when there is nothing but whitespace after the
    heading, so callers can skip the container entirely.
    """
    body = strip_heading(content)
    if not body.strip():
        return ""

    return markdown.markdown(
        body,
        extensions=["fenced_code", "tables", "sane_lists", GuideExtension()],
    )
