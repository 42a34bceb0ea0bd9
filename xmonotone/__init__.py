from .errors import MonotoneError, InvalidInputError, PolyFormatError
from .point import Point, as_point, as_points
from .monotone import (
    x_monotone_from_polygon,
    monotone_chains,
    split_boundary,
    make_x_monotone,
    reflect,
    combine,
)
from .polyio import read_poly, write_poly
