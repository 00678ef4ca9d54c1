from inkex.paths import Arc, Curve, Line, Move, Quadratic, Smooth
from .errors import AnimationInFlight, FractalError, InvalidAngle, \
    InvalidParameter
from .geometry import ORIGIN, Point, RADIANS_45_DEGREES, \
    RADIANS_60_DEGREES, RADIANS_90_DEGREES, RADIANS_120_DEGREES, \
    RADIANS_180_DEGREES, RADIANS_360_DEGREES, append_line, \
    coerce_orientation, next_point, normalize_angle, rotate_point, \
    translate_point, triangle_height
from .options import DEFAULT_LEVEL_CHANGE, EdgeStyle, FractalOptions, \
    LevelChange, Strategy, TIGHTENER
from .sierpinski import arrowhead_curve, arrowhead_lsystem, \
    equilateral_triangle, get_arrowhead_from_lsystem, \
    get_sierpinski_arrowhead_curve, get_sierpinski_triangle, \
    sierpinski_triangle_iterative, sierpinski_triangle_recursive
from .pythagoras_tree import catmull_rom_edge, curved_edge, \
    edge_function, elliptical_edge, get_pythagoras_tree, \
    pythagoras_square, pythagoras_tree, random_catmull_rom_edge, \
    straight_edge
from .surface import SvgSurface
from .renderer import reveal, reveal_branched
from .layout import FractalInstance, LevelCounter, draw_fractal_row
from .extension import FractalPaths, main
