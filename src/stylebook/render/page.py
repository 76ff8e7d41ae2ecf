import json
from html import escape

from stylebook.guide.export import Feedback
from stylebook.guide.store import SectionStore
from stylebook.render.content import render_content
from stylebook.render.swatches import render_swatches

FEEDBACK_LABELS = {
    Feedback.COPIED.value: "Copied!",
    Feedback.ERROR.value: "Copy failed",
}

STYLES = """
body { font-family: system-ui, sans-serif; margin: 0; color: #1f2933; }
.layout { display: flex; gap: 2rem; max-width: 64rem; margin: 0 auto; padding: 2rem; }
nav { position: sticky; top: 2rem; align-self: flex-start; min-width: 12rem; }
nav a { display: block; padding: 0.25rem 0.5rem; color: inherit; text-decoration: none; border-radius: 4px; }
nav a.active { background: #9D50BB; color: #fff; }
main { flex: 1; }
.toolbar { display: flex; justify-content: space-between; align-items: center; margin-bottom: 1rem; }
.toolbar button, .toolbar a { padding: 0.4rem 0.8rem; border: 1px solid #cbd2d9; border-radius: 4px; background: #fff; color: inherit; text-decoration: none; cursor: pointer; }
details { border: 1px solid #e4e7eb; border-radius: 8px; margin-bottom: 1rem; padding: 0.5rem 1rem; }
details.active { border-color: #9D50BB; }
summary { font-weight: 600; font-size: 1.1rem; cursor: pointer; }
.swatch-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(8rem, 1fr)); gap: 0.75rem; margin: 1rem 0; }
.swatch { height: 6rem; border: 0; border-radius: 6px; display: flex; flex-direction: column; justify-content: flex-end; padding: 0.5rem; cursor: pointer; text-align: left; }
.swatch.on-dark { color: #fff; }
.swatch.on-light { color: #111; }
.code-block { position: relative; }
.code-block .copy-code { position: absolute; top: 0.5rem; right: 0.5rem; opacity: 0; transition: opacity 0.2s; }
.code-block:hover .copy-code { opacity: 1; }
pre { background: #f5f7fa; padding: 1rem; overflow-x: auto; border-radius: 6px; }
"""

SCRIPT = """
(function () {
  var config = JSON.parse(document.getElementById("guide-config").textContent);

  function flash(button, text) {
    var original = button.getAttribute("data-label") || button.innerHTML;
    button.setAttribute("data-label", original);
    button.textContent = text;
    setTimeout(function () { button.innerHTML = original; }, config.feedbackMs);
  }

  function copy(button, text) {
    navigator.clipboard.writeText(text).then(
      function () { flash(button, config.labels.copied); },
      function () { flash(button, config.labels.error); }
    );
  }

  function activate(id) {
    document.querySelectorAll("[data-section]").forEach(function (el) {
      el.classList.toggle("active", el.getAttribute("data-section") === id);
    });
    setTimeout(function () {
      var target = document.getElementById(id);
      if (target) { target.scrollIntoView({ behavior: "smooth", block: "start" }); }
    }, config.scrollDelayMs);
  }

  document.querySelectorAll("[data-copy]").forEach(function (button) {
    button.addEventListener("click", function (event) {
      event.preventDefault();
      copy(button, button.getAttribute("data-copy"));
    });
  });

  var copyAll = document.getElementById("copy-guide");
  if (copyAll) {
    copyAll.addEventListener("click", function () {
      copy(copyAll, config.markdown);
    });
  }

  document.querySelectorAll("details[data-section]").forEach(function (details) {
    details.addEventListener("toggle", function () {
      if (details.open) { activate(details.id); }
    });
  });

  document.querySelectorAll("nav a[data-section]").forEach(function (link) {
    link.addEventListener("click", function (event) {
      event.preventDefault();
      var details = document.getElementById(link.getAttribute("data-section"));
      if (!details) { return; }
      if (!details.open) { details.open = true; }
      activate(details.id);
    });
  });

  if (config.scrollTo) { activate(config.scrollTo); }
})();
"""


def _render_section(store: SectionStore, section) -> str:
    active = " active" if section.id == store.active_section_id else ""
    is_open = " open" if section.is_open else ""
    colors = store.colors_for(section.id)
    parts = [
        f'<details id="{escape(section.id, quote=True)}" '
        f'data-section="{escape(section.id, quote=True)}" class="section{active}"{is_open}>',
        f"<summary>{escape(section.title)}</summary>",
    ]
    if colors:
        parts.append(render_swatches(colors))
    body = render_content(section.content)
    if body:
        parts.append(f'<div class="section-content">{body}</div>')
    parts.append("</details>")
    return "\n".join(parts)


def render_page(
    store: SectionStore,
    download_url: str,
    feedback_ms: int = 2000,
    scroll_delay_ms: int = 100,
    scroll_to: str | None = None,
    title: str = "Generated Style Guide",
) -> str:
    """Render the whole guide as a standalone, interactive HTML page."""
    config = json.dumps(
        {
            "feedbackMs": feedback_ms,
            "scrollDelayMs": scroll_delay_ms,
            "scrollTo": scroll_to,
            "labels": FEEDBACK_LABELS,
            "markdown": store.markdown,
        }
    ).replace("<", "\\u003c")

    nav_links = []
    for section in store.sections:
        active = ' class="active"' if section.id == store.active_section_id else ""
        section_id = escape(section.id, quote=True)
        nav_links.append(
            f'<a href="#{section_id}" data-section="{section_id}"{active}>'
            f"{escape(section.title)}</a>"
        )

    if store.markdown:
        toolbar = (
            '<div class="toolbar">'
            f"<h1>{escape(title)}</h1>"
            "<div>"
            '<button type="button" id="copy-guide">Copy</button> '
            f'<a href="{escape(download_url, quote=True)}" download>Download</a>'
            "</div></div>"
        )
    else:
        toolbar = ""

    sections = "\n".join(_render_section(store, s) for s in store.sections)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
<style>{STYLES}</style>
</head>
<body>
<div class="layout">
<nav>{"".join(nav_links)}</nav>
<main>
{toolbar}
{sections}
</main>
</div>
<script type="application/json" id="guide-config">{config}</script>
<script>{SCRIPT}</script>
</body>
</html>
"""
