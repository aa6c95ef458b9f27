"""dxf2price - Measure CAD drawings for cutting quotes.

dxf2price reads a 2-D DXF drawing, reconstructs closed contours (shapes) from
its lines, arcs, circles and bulged polylines, and measures the outer contour,
its holes and the overall cut length. The measurements feed a simple price
formula for sheet cutting jobs.

Example:
    $ dxf2price part.dxf --sheet-price 40 --entrance-price 2 --cutting-price 15

This prints the sheet area, cut length and number of entrances for part.dxf.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
