"""Cutting quote from drawing measurements.

price = sheet area x sheet price + cut length x cutting price
        + entrances x entrance price

Sheet area is the bounding box of the main shape; every shape needs its own
entrance (pierce) for the cutter.
"""

import math
from dataclasses import dataclass
from typing import Any

from dxf2price.config import PricingConfig
from dxf2price.domain import FileData


@dataclass(frozen=True)
class PriceQuote:
    """Quote for one drawing.

    Attributes:
        sheet_area: Bounding-box area in square metres
        cut_length: Total cut length in metres
        entrances: Number of cut entrances
        total: Price rounded up to a whole unit
    """

    sheet_area: float
    cut_length: float
    entrances: int
    total: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "sheetArea": self.sheet_area,
            "cutLength": self.cut_length,
            "entrances": self.entrances,
            "total": self.total,
        }


def estimate_price(file_data: FileData, pricing: PricingConfig) -> PriceQuote:
    """Apply the unit prices to a measured drawing.

    Args:
        file_data: Measurement result
        pricing: Unit prices and drawing unit scale

    Returns:
        PriceQuote for the drawing
    """
    units = pricing.units_per_metre
    sheet_area = file_data.width * file_data.height / units**2
    cut_length = file_data.perimeter / units
    entrances = len(file_data.shapes)

    total = math.ceil(
        sheet_area * pricing.sheet_price
        + cut_length * pricing.cutting_price
        + entrances * pricing.entrance_price
    )

    return PriceQuote(
        sheet_area=sheet_area,
        cut_length=cut_length,
        entrances=entrances,
        total=total,
    )
