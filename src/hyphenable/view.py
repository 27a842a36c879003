"""Styled text element displaying soft-hyphenated text in an SVG page.

HyphenableText hyphenates its text word by word with the locale of its
TextEnvironment and hands the result unchanged to an SVG text element. The
styling (font, color, alignment, frame width) is applied to the element only;
hyphenation never looks at it.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import svgwrite
import svgwrite.text

from hyphenable.common import DEFAULT_LOCALE, Align, HyphenationSettings
from hyphenable.oracle import HyphenationOracle
from hyphenable.page import SvgPage
from hyphenable.text import hyphenate_by_word, sample_texts

logger = logging.getLogger(__name__)

_TEXT_ANCHORS: Dict[Align, str] = {
    Align.LEFT: "start",
    Align.CENTER: "middle",
    Align.RIGHT: "end",
}


@dataclass(frozen=True)
class TextEnvironment:
    """Values a text element takes from its surroundings rather than its caller.

    Attributes:
        locale: Locale tag used for hyphenation.
    """

    locale: str = DEFAULT_LOCALE

    @classmethod
    def current(cls) -> TextEnvironment:
        """Return the environment configured through environment variables."""
        return cls(locale=HyphenationSettings.from_env().locale)


@dataclass(frozen=True)
class TextStyle:
    """Styling of a text element.

    Attributes:
        font_family: CSS font family list.
        font_size: Font size in millimeters (user units of SvgPage).
        fill: Fill color.
        align: Horizontal alignment relative to the insert point.
        max_width: Width of the text frame in millimeters. A renderer that
            wraps text breaks lines within this width. None means unlimited.
    """

    font_family: str = "sans-serif"
    font_size: float = 4.0
    fill: str = "black"
    align: Align = Align.LEFT
    max_width: Optional[float] = None

    def svg_attributes(self) -> Dict[str, Any]:
        """Return the keyword arguments for an svgwrite text element."""
        attributes: Dict[str, Any] = {
            "font_family": self.font_family,
            "font_size": self.font_size,
            "fill": self.fill,
            "text_anchor": _TEXT_ANCHORS[self.align],
        }
        if self.max_width is not None:
            # px are user units, i.e. millimeters on SvgPage
            attributes["style"] = f"inline-size:{self.max_width}px"
        return attributes

    def frame_left(self, x: float) -> float:
        """Return the left edge of the text frame for the insert point x."""
        width = self.max_width or 0.0
        if self.align is Align.CENTER:
            return x - width / 2
        if self.align is Align.RIGHT:
            return x - width
        return x


@dataclass
class HyphenableText:
    """A text element with soft hyphens at every hyphenation point.

    Example:
        >>> page = SvgPage.create_page_a4()
        >>> element = HyphenableText("Antidisestablishmentarianism", TextEnvironment("en_US"))
        >>> _ = element.render(page, 20, 20)
    """

    text: str
    environment: TextEnvironment = field(default_factory=TextEnvironment.current)
    minimum_word_length: int = 0
    style: TextStyle = field(default_factory=TextStyle)
    oracle: Optional[HyphenationOracle] = None

    @property
    def content(self) -> str:
        """The hyphenated text as handed to the display element."""
        return hyphenate_by_word(
            self.text,
            self.environment.locale,
            minimum_word_length=self.minimum_word_length,
            oracle=self.oracle,
        )

    def styled(self, **changes: Any) -> HyphenableText:
        """Return a copy with the given TextStyle attributes replaced.

        Example:
            >>> HyphenableText("text", TextEnvironment()).styled(fill="red").style.fill
            'red'
        """
        return dataclasses.replace(self, style=dataclasses.replace(self.style, **changes))

    def svg_element(self, drawing: svgwrite.Drawing, x: float, y: float) -> svgwrite.text.Text:
        """Create the SVG text element with its baseline starting at (x, y).

        Args:
            drawing: The drawing acting as element factory.
            x: Horizontal anchor position in millimeters.
            y: Baseline position in millimeters.

        Returns:
            The text element, not yet added to any container.
        """
        return drawing.text(self.content, insert=(x, y), **self.style.svg_attributes())

    def render(self, page: SvgPage, x: float, y: float) -> svgwrite.text.Text:
        """Add the text element to the main layer of page.

        If the style has a frame width, the frame outline is drawn to the
        debug layer.

        Returns:
            The added text element.
        """
        element = page.add(self.svg_element(page.drawing, x, y))

        if self.style.max_width is not None:
            page.add(
                page.drawing.rect(
                    insert=(self.style.frame_left(x), y - self.style.font_size),
                    size=(self.style.max_width, self.style.font_size * 1.25),
                    stroke="blue",
                    stroke_width=0.1,
                    fill="none",
                ),
                True,
            )
        logger.debug("Rendered text element at (%s, %s) for locale '%s'", x, y, self.environment.locale)
        return element


def main(output_filename: str = "hyphenable_preview.svg") -> None:
    """Render the sample sentences in three styles to an SVG file."""
    environment = TextEnvironment.current()
    large, body, caption = sample_texts()
    page = SvgPage.create_page_a4()

    elements = [
        (HyphenableText(large, environment).styled(font_size=10.0, fill="red", max_width=170.0), 30.0),
        (HyphenableText(body, environment).styled(max_width=170.0), 120.0),
        (HyphenableText(caption, environment).styled(font_size=3.0, fill="gray", max_width=170.0), 160.0),
    ]
    for element, y_baseline in elements:
        element.render(page, 20.0, y_baseline)

    print(f"save file {output_filename} ...")
    page.save_as(output_filename, include_debug_layer=True, pretty=True, indent=2)
    print("save done.")


if __name__ == "__main__":
    main()
