from stylebook.guide.parser import ColorEntry
from stylebook.render.swatches import format_swatch, overlay_class, render_swatches


def test_empty_colors_render_nothing():
    assert render_swatches([]) == ""


def test_swatch_per_color():
    rendered = render_swatches(
        [
            ColorEntry(color="#5D5FEF", name="Primary"),
            ColorEntry(color="#F1C40F", name="<Sun>"),
        ]
    )

    assert rendered.count('class="swatch ') == 2
    assert 'data-copy="#5D5FEF"' in rendered
    assert "background-color: #5D5FEF" in rendered
    assert "&lt;Sun&gt;" in rendered


def test_overlay_follows_contrast():
    assert overlay_class("#000000") == "on-dark"
    assert overlay_class("#FFFFFF") == "on-light"
    assert 'class="swatch on-dark"' in render_swatches([ColorEntry("#101010", "Ink")])


def test_format_swatch_for_terminal():
    line = format_swatch(ColorEntry(color="#FFFFFF", name="Paper"))

    assert "#FFFFFF" in line
    assert line.endswith("Paper (light)")
