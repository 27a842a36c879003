"""SVG page used as display surface for hyphenated text."""

from __future__ import annotations

import copy
import gzip
import io
from dataclasses import dataclass
from typing import Optional, Union

import svgwrite
import svgwrite.base
import svgwrite.container
import svgwrite.elementfactory
from svgwrite.extensions import Inkscape


@dataclass
class SvgPage:
    """A page (canvas) described by SVG, measured in millimeters.

    The viewbox equals the canvas, origin top-left, y pointing down, one user
    unit per millimeter. Contains groups/layers:
        - main   -- editable->locked=False  --  hidden->display="block"
        - debug  -- editable->locked=False  --  hidden->display="none"
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    main_layer: svgwrite.container.Group
    debug_layer: svgwrite.container.Group

    def __init__(self, width_mm: float, height_mm: float):
        """
        Initialize the SVG page.

        Args:
            width_mm (float): The width of the canvas (=whole page) in millimeters.
            height_mm (float): The height of the canvas (=whole page) in millimeters.
        """
        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(f"{width_mm}mm", f"{height_mm}mm"),
            viewBox=f"0 0 {width_mm} {height_mm}",
            profile="full",
        )

        self._inkscape = Inkscape(self.drawing)
        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.debug_layer = self._inkscape.layer(label="debug", locked=False, display="none")

    def add(
        self,
        element: Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder],
        add_to_debug_layer: bool = False,
    ) -> Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder]:
        """Add a SVG element as subelement either to main or debug layer.

        Args:
            element (svgwrite.base.BaseElement): append this SVG element
            add_to_debug_layer (bool, optional): True if element should be added to debug layer.
                Defaults to False.

        Returns:
            svgwrite.base.BaseElement: the added element
        """
        if add_to_debug_layer:
            return self.debug_layer.add(element)
        return self.main_layer.add(element)

    def tostring(self, include_debug_layer: bool = False) -> str:
        """Return the assembled page as SVG markup."""
        return self._assembled(include_debug_layer).tostring()

    def save_as(
        self,
        filename: str,
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_layer (bool, optional): True if file should contain debug_layer. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        svg_buffer = io.StringIO()
        self._assembled(include_debug_layer).write(svg_buffer, pretty=pretty, indent=indent)
        output_data = svg_buffer.getvalue().encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)

    def _assembled(self, include_debug_layer: bool) -> svgwrite.Drawing:
        # work on copies so the page can be saved more than once
        return self.assemble_tree(
            copy.deepcopy(self.drawing),
            copy.deepcopy(self.main_layer),
            copy.deepcopy(self.debug_layer),
            include_debug_layer,
        )

    @classmethod
    def assemble_tree(
        cls,
        drawing: svgwrite.Drawing,
        main_layer: svgwrite.container.Group,
        debug_layer: Optional[svgwrite.container.Group] = None,
        include_debug_layer: bool = False,
    ) -> svgwrite.Drawing:
        """Assemble a tree out of the given SVG elements.

        Args:
            drawing (svgwrite.Drawing): The main SVG drawing element.
            main_layer (svgwrite.container.Group): The main layer of the drawing.
            debug_layer (svgwrite.container.Group): The debug layer of the drawing.
            include_debug_layer (bool, optional): Include the debug layer in the tree. Defaults to False.

        Returns:
            svgwrite.Drawing: The given drawing with assembled SVG drawing elements.
        """
        if include_debug_layer and debug_layer is not None:
            drawing.add(debug_layer)
        drawing.add(main_layer)
        return drawing

    @classmethod
    def create_page_a4(cls) -> SvgPage:
        """Create a new portrait page with DIN A4 dimensions (210 x 297 mm)."""
        return SvgPage(210, 297)
