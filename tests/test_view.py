"""Test module for hyphenable.view and hyphenable.page

The tests are run using pytest.
"""

import gzip

from hyphenable.common import SOFT_HYPHEN, Align
from hyphenable.oracle import HyphenationOracle
from hyphenable.page import SvgPage
from hyphenable.text import hyphenate_by_word, strip_soft_hyphens
from hyphenable.view import HyphenableText, TextEnvironment, TextStyle, main


class MiddleBreakOracle(HyphenationOracle):
    """Oracle allowing a single break in the middle of every text."""

    def is_hyphenation_supported(self, locale):
        return locale == "en_US"

    def next_break_before_index(self, text, index, search_range, locale):
        middle = search_range.length // 2
        return middle if middle < index else None


class TestTextEnvironment:
    """Tests for TextEnvironment."""

    def test_current_uses_settings(self, monkeypatch):
        """The current environment takes its locale from the settings."""
        monkeypatch.setenv("HYPHENABLE_LOCALE", "de-CH")
        assert TextEnvironment.current().locale == "de_CH"


class TestTextStyle:
    """Tests for TextStyle."""

    def test_svg_attributes(self):
        """Style values become svgwrite keyword arguments."""
        style = TextStyle(font_family="serif", font_size=6.0, fill="red", align=Align.RIGHT)
        assert style.svg_attributes() == {
            "font_family": "serif",
            "font_size": 6.0,
            "fill": "red",
            "text_anchor": "end",
        }

    def test_max_width_becomes_inline_size(self):
        """A frame width is expressed as inline-size."""
        assert TextStyle(max_width=170.0).svg_attributes()["style"] == "inline-size:170.0px"

    def test_frame_left(self):
        """The frame is placed according to the alignment."""
        assert TextStyle(max_width=100.0).frame_left(50.0) == 50.0
        assert TextStyle(max_width=100.0, align=Align.CENTER).frame_left(50.0) == 0.0
        assert TextStyle(max_width=100.0, align=Align.RIGHT).frame_left(50.0) == -50.0


class TestHyphenableText:
    """Tests for HyphenableText."""

    def test_content_hyphenated_by_word(self):
        """Content is the word-by-word hyphenation in the environment's locale."""
        element = HyphenableText(
            "cat elephant",
            TextEnvironment("en_US"),
            minimum_word_length=5,
            oracle=MiddleBreakOracle(),
        )
        assert element.content == "cat elep" + SOFT_HYPHEN + "hant"

    def test_unsupported_environment_locale(self):
        """An unsupported environment locale shows the text unchanged."""
        element = HyphenableText("elephant", TextEnvironment("xx_XX"), oracle=MiddleBreakOracle())
        assert element.content == "elephant"

    def test_content_with_pyphen(self):
        """The default oracle is used when none is given."""
        text = "Supercalifragilisticexpialidocious intergalactic hypernova"
        element = HyphenableText(text, TextEnvironment("en_US"))
        assert element.content == hyphenate_by_word(text, "en_US")
        assert strip_soft_hyphens(element.content) == text

    def test_styled_returns_copy(self):
        """Styling returns a new element and leaves the original untouched."""
        element = HyphenableText("text", TextEnvironment("en_US"))
        red = element.styled(fill="red", font_size=8.0)
        assert red.style.fill == "red"
        assert red.style.font_size == 8.0
        assert element.style == TextStyle()
        assert red.text == element.text

    def test_svg_element_forwards_content(self):
        """The text element carries the hyphenated content and the style."""
        page = SvgPage(100, 50)
        element = HyphenableText("elephant", TextEnvironment("en_US"), oracle=MiddleBreakOracle()).styled(
            align=Align.CENTER, fill="blue"
        )
        svg_text = element.svg_element(page.drawing, 10, 20)

        assert svg_text.text == "elep" + SOFT_HYPHEN + "hant"
        assert svg_text.attribs["text-anchor"] == "middle"
        assert svg_text.attribs["fill"] == "blue"
        assert svg_text.attribs["font-family"] == "sans-serif"

    def test_render_adds_to_main_layer(self):
        """Rendering adds the text to the page markup."""
        page = SvgPage(100, 50)
        HyphenableText("elephant", TextEnvironment("en_US"), oracle=MiddleBreakOracle()).render(page, 10, 20)

        markup = page.tostring()
        assert "elep" + SOFT_HYPHEN + "hant" in markup
        assert "<text" in markup
        assert "<rect" not in markup

    def test_render_frame_on_debug_layer(self):
        """A frame width draws its outline on the debug layer only."""
        page = SvgPage(100, 50)
        element = HyphenableText("elephant", TextEnvironment("en_US"), oracle=MiddleBreakOracle())
        element.styled(max_width=80.0).render(page, 10, 20)

        assert "<rect" not in page.tostring()
        assert "<rect" in page.tostring(include_debug_layer=True)
        assert "inline-size:80.0px" in page.tostring()


class TestSvgPage:
    """Tests for SvgPage."""

    def test_a4(self):
        """The A4 page measures 210 x 297 mm."""
        page = SvgPage.create_page_a4()
        assert page.drawing.attribs["width"] == "210mm"
        assert page.drawing.attribs["height"] == "297mm"

    def test_save_as(self, tmp_path):
        """Pages are saved as plain SVG."""
        page = SvgPage(100, 50)
        page.add(page.drawing.text("hello", insert=(1, 2)))
        filename = tmp_path / "page.svg"
        page.save_as(str(filename))
        data = filename.read_bytes()
        assert b"<svg" in data
        assert b"hello" in data

    def test_save_as_compressed(self, tmp_path):
        """Compressed pages are gzip encoded."""
        page = SvgPage(100, 50)
        filename = tmp_path / "page.svgz"
        page.save_as(str(filename), compressed=True)
        assert b"<svg" in gzip.decompress(filename.read_bytes())

    def test_save_twice(self, tmp_path):
        """Saving does not alter the page."""
        page = SvgPage(100, 50)
        page.add(page.drawing.text("hello", insert=(1, 2)))
        first = tmp_path / "first.svg"
        second = tmp_path / "second.svg"
        page.save_as(str(first))
        page.save_as(str(second))
        assert first.read_bytes() == second.read_bytes()


def test_main_writes_preview(tmp_path, monkeypatch):
    """The preview renders all sample texts into one file."""
    monkeypatch.setenv("HYPHENABLE_LOCALE", "en_US")
    filename = tmp_path / "preview.svg"
    main(str(filename))
    markup = filename.read_text(encoding="utf-8")
    assert markup.count("<text") == 3
    assert SOFT_HYPHEN in markup
