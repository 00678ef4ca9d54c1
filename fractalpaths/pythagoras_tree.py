'''
Copyright (C) 2026 The Fractal Paths authors

This program is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program; if not, write to the Free Software
Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
02110-1301, USA.
'''

import math
import random
from inkex.paths import Arc, Line, Move, Quadratic, Smooth
from .geometry import Point, RADIANS_45_DEGREES, RADIANS_90_DEGREES, \
    check_side_length, clamp_depth, coerce_orientation, rotate_point, \
    translate_point
from .options import EdgeStyle, TIGHTENER

# Depth used when a caller does not specify one.
DEFAULT_DEPTH = 3

# Number of segments each square contributes to a tree's path.
SQUARE_SEGMENTS = 6

# Factor by which each generation of squares shrinks.
CHILD_SCALE = math.sqrt(2)/2


# ----------------------------------------------------------------------

# Edge functions take the two corners an edge connects plus the center of
# the square and return a single path segment.

def straight_edge(from_point, to_point, center=None):
    'Draw a straight line to the next corner.'
    return Line(to_point[0], to_point[1])


def curved_edge(from_point, to_point, center=None):
    '''Draw a smooth curve that bends toward the next corner and returns
    to the current one.'''
    return Smooth(to_point[0], to_point[1], from_point[0], from_point[1])


def elliptical_edge(from_point, to_point, center=None):
    'Draw a small, large-arc loop to the next corner.'
    return Arc(5, 5, 0, 1, 1, to_point[0], to_point[1])


def catmull_rom_edge(from_point, to_point, center, tension=0.75):
    '''Draw a curve to the next corner that passes through a point pulled
    from the current corner toward the center of the square.  Tension 0
    keeps the curve on the corner; tension 1 pulls it to the center.'''
    pull = Point(from_point[0] + tension*(center[0] - from_point[0]),
                 from_point[1] + tension*(center[1] - from_point[1]))

    # B(1/2) = (P0 + 2C + P1)/4, so solve for the control point C that
    # puts the middle of the curve on the pull point.
    ctrl_x = 2*pull.x - (from_point[0] + to_point[0])/2
    ctrl_y = 2*pull.y - (from_point[1] + to_point[1])/2
    return Quadratic(ctrl_x, ctrl_y, to_point[0], to_point[1])


def random_catmull_rom_edge(from_point, to_point, center, rng=random):
    'Draw each edge with a slightly different curve.'
    return catmull_rom_edge(from_point, to_point, center, rng.random())


_edge_functions = {
    EdgeStyle.STRAIGHT: straight_edge,
    EdgeStyle.CURVED: curved_edge,
    EdgeStyle.ELLIPTICAL: elliptical_edge,
    EdgeStyle.CATMULL_ROM: catmull_rom_edge,
    EdgeStyle.CATMULL_ROM_RANDOM: random_catmull_rom_edge,
}


def edge_function(edge):
    'Map an EdgeStyle (or a function) to an edge function.'
    if callable(edge):
        return edge
    return _edge_functions[EdgeStyle(edge)]


# ----------------------------------------------------------------------

def square_corners(center, heading, side_length):
    '''Return the bottom-left, bottom-right, top-right, and top-left
    corners of a square, rotated about its center by the heading.'''
    half = side_length/2
    cx, cy = center
    corners = [Point(cx - half, cy + half),
               Point(cx + half, cy + half),
               Point(cx + half, cy - half),
               Point(cx - half, cy - half)]
    return [rotate_point(p, heading, center) for p in corners]


def pythagoras_square(center, heading, side_length, edge=straight_edge):
    '''Return the path of one square of a Pythagoras tree.  The path
    begins with a move to the center so an animation can grow the square
    outward from there.'''
    edge = edge_function(edge)
    bl, br, tr, tl = square_corners(center, heading, side_length)

    # NOTE: The closing edge runs from the top-right corner, not the
    # top-left one.  Branched reveals group segments by this shape.
    return [Move(center[0], center[1]),
            Move(bl.x, bl.y),
            edge(bl, br, center),
            edge(br, tr, center),
            edge(tr, tl, center),
            edge(tr, bl, center)]


def child_center(center, heading, child_heading, side_length,
                 tightener=TIGHTENER):
    'Return the center of a child square.'
    pt = translate_point(center, tightener*side_length/2, heading)
    return translate_point(pt, tightener*side_length*3/4, child_heading)


def pythagoras_tree(depth, center, heading, side_length, edge=straight_edge,
                    tightener=TIGHTENER):
    '''Return the path of a Pythagoras tree square by square, depth first:
    each square is followed by its left subtree and then its right
    subtree.'''
    if depth <= 0:
        return []
    center = Point(*center)
    path = pythagoras_square(center, heading, side_length, edge)
    for child_heading in (heading - RADIANS_45_DEGREES,
                          heading + RADIANS_45_DEGREES):
        path += pythagoras_tree(depth - 1,
                                child_center(center, heading,
                                             child_heading, side_length,
                                             tightener),
                                child_heading,
                                side_length*CHILD_SCALE,
                                edge, tightener)
    return path


def get_pythagoras_tree(center, side_length, depth=None, orientation=1,
                        edge=EdgeStyle.STRAIGHT, tightener=TIGHTENER):
    '''Return the path of a Pythagoras tree whose trunk square is centered
    on a given point.  Orientation +1 grows the tree up the page and -1
    grows it down.'''
    if depth is None:
        depth = DEFAULT_DEPTH
    check_side_length(side_length)
    orientation = coerce_orientation(orientation)
    return pythagoras_tree(clamp_depth(depth), center,
                           -orientation*RADIANS_90_DEGREES, side_length,
                           edge_function(edge), tightener)


def square_count(depth):
    'Return the number of squares in a tree of a given depth.'
    return 2**clamp_depth(depth) - 1
