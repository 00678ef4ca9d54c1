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

import collections
from inkex.paths import Line, Move
from .geometry import Point, RADIANS_60_DEGREES, RADIANS_120_DEGREES, \
    append_line, check_side_length, clamp_depth, coerce_orientation, \
    next_point, normalize_angle, triangle_height
from .options import DEFAULT_LEVEL_CHANGE, Strategy

# Depth used when a caller does not specify one.
DEFAULT_DEPTH = 3

# A pending triangle in the level-by-level generator.
_Triangle = collections.namedtuple('_Triangle',
                                   ['center', 'side_length', 'depth'])


def _start_corner(center, side_length, orientation):
    '''Return the "bottom left" corner of an outer triangle, where "bottom"
    is relative to the orientation.'''
    height = triangle_height(RADIANS_60_DEGREES, side_length)
    return Point(center.x - side_length/2,
                 center.y + orientation*height/4)


def equilateral_triangle(start, side_length, orientation=1):
    '''Return the path of an equilateral triangle.  The path starts at
    the given corner, heads along the x axis, and turns by 120 degrees
    after each side: clockwise on screen for orientation +1 and
    counterclockwise for -1.'''
    orientation = coerce_orientation(orientation)
    path = [Move(start[0], start[1])]
    angle = 0
    point = start
    for _ in range(3):
        point = next_point(point, side_length, angle)
        path = append_line(path, point)
        angle += orientation*RADIANS_120_DEGREES
    return path


# ----------------------------------------------------------------------

# Sierpinski triangle

def _inner_triangle(center, side_length, orientation):
    '''Return the path of the triangle drawn around a center point plus
    the centers of its left, right, and vertical children.'''
    height = triangle_height(RADIANS_60_DEGREES, side_length)
    start = Point(center.x - side_length/2,
                  center.y - orientation*height/2)
    path = equilateral_triangle(start, side_length, orientation)
    left = Point(center.x - side_length/2, center.y + orientation*height/4)
    right = Point(center.x + side_length/2, center.y + orientation*height/4)
    vertical = Point(center.x, center.y - orientation*3*height/4)
    return path, (left, right, vertical)


def sierpinski_triangle_recursive(center, side_length, depth, orientation=1,
                                  level_change=DEFAULT_LEVEL_CHANGE):
    '''Return the interior of a Sierpinski triangle subtree by subtree:
    each triangle is followed by all of its left descendants, then all of
    its right descendants, then all of its vertical descendants.'''
    check_side_length(side_length)
    orientation = coerce_orientation(orientation)
    if depth <= 0:
        return []
    path, children = _inner_triangle(Point(*center), side_length,
                                     orientation)
    for child, change in zip(children, level_change):
        path = path + sierpinski_triangle_recursive(child, side_length/2,
                                                    depth - change,
                                                    orientation,
                                                    level_change)
    return path


def sierpinski_triangle_iterative(center, side_length, depth, orientation=1,
                                  level_change=DEFAULT_LEVEL_CHANGE):
    '''Return the interior of a Sierpinski triangle level by level: all
    triangles of one size are drawn before any of the next smaller size.'''
    check_side_length(side_length)
    orientation = coerce_orientation(orientation)
    path = []
    queue = collections.deque()
    if depth > 0:
        queue.append(_Triangle(Point(*center), side_length, depth))
    while queue:
        tri = queue.popleft()
        tri_path, children = _inner_triangle(tri.center, tri.side_length,
                                             orientation)
        path.extend(tri_path)
        for child, change in zip(children, level_change):
            if tri.depth - change > 0:
                queue.append(_Triangle(child, tri.side_length/2,
                                       tri.depth - change))
    return path


_triangle_strategies = {
    Strategy.RECURSIVE: sierpinski_triangle_recursive,
    Strategy.ITERATIVE: sierpinski_triangle_iterative,
}


def get_sierpinski_triangle(center, side_length, depth=None, orientation=1,
                            strategy=Strategy.RECURSIVE,
                            level_change=DEFAULT_LEVEL_CHANGE):
    '''Return the path of a Sierpinski triangle: the outer boundary
    followed by the interior triangles in the order dictated by the
    strategy.  An orientation of +1 points the interior triangles down
    and the boundary up.'''
    if depth is None:
        depth = DEFAULT_DEPTH
    depth = clamp_depth(depth)
    check_side_length(side_length)
    orientation = coerce_orientation(orientation)
    center = Point(*center)

    # The outer triangle is drawn with the opposite orientation.
    start = _start_corner(center, side_length, orientation)
    path = equilateral_triangle(start, side_length, -orientation)
    interior = _triangle_strategies[Strategy(strategy)]
    return path + interior(center, side_length/2, depth, orientation,
                           level_change)


# ----------------------------------------------------------------------

# Sierpinski arrowhead curve

def arrowhead_curve(depth, from_point, side_length, angle, turn_sign,
                    orientation):
    '''Trace one arrowhead subcurve.  Return the lines it draws, the
    point at which it ends, and the heading it ends with.  The heading is
    kept unmirrored; the orientation is applied only when a line is
    drawn.'''
    if depth <= 0:
        point = next_point(from_point, side_length, orientation*angle)
        return append_line([], point), point, angle
    path = []
    point = from_point
    for i, sign in enumerate((-turn_sign, turn_sign, -turn_sign)):
        if i > 0:
            angle = normalize_angle(angle + turn_sign*RADIANS_60_DEGREES)
        sub_path, point, angle = arrowhead_curve(depth - 1, point,
                                                 side_length/2, angle,
                                                 sign, orientation)
        path += sub_path
    return path, point, angle


def _initial_heading(depth):
    '''Return the heading that makes the curve end where it would for a
    depth of zero.'''
    if depth % 2 == 0:
        return 0.0
    return -RADIANS_60_DEGREES


def get_sierpinski_arrowhead_curve(center, side_length, depth=None,
                                   orientation=1):
    '''Return the path of a Sierpinski arrowhead curve.  The curve fills
    the same triangle get_sierpinski_triangle outlines and runs from its
    "bottom left" corner to its "bottom right" corner.'''
    if depth is None:
        depth = DEFAULT_DEPTH
    depth = clamp_depth(depth)
    check_side_length(side_length)
    orientation = coerce_orientation(orientation)
    start = _start_corner(Point(*center), side_length, orientation)
    lines, _, _ = arrowhead_curve(depth, start, side_length,
                                  _initial_heading(depth), 1, orientation)
    return [Move(start.x, start.y)] + lines


# ----------------------------------------------------------------------

# The arrowhead curve can also be expressed as an L-system:
#
#   Alphabet:   X, Y
#   Constants:  F, +, -
#   Axiom:      XF
#   Rules:      X -> YF+XF+Y
#               Y -> XF-YF-X
#
# F means "draw forward", + means "turn 60 degrees", and - means "turn
# -60 degrees".

ARROWHEAD_AXIOM = 'XF'
ARROWHEAD_RULES = {'X': 'YF+XF+Y',
                   'Y': 'XF-YF-X'}


def expand_lsystem(axiom, rules, generations):
    'Rewrite an axiom a given number of times.'
    text = axiom
    for _ in range(generations):
        text = ''.join([rules.get(c, c) for c in text])
    return text


def arrowhead_lsystem(depth):
    'Return the turtle commands of an arrowhead curve of a given depth.'
    text = expand_lsystem(ARROWHEAD_AXIOM, ARROWHEAD_RULES,
                          clamp_depth(depth))
    return ''.join([c for c in text if c in 'F+-'])


def get_arrowhead_from_lsystem(center, side_length, depth=None,
                               orientation=1):
    '''Return the same path as get_sierpinski_arrowhead_curve but derived
    by walking the expanded L-system with a turtle.'''
    if depth is None:
        depth = DEFAULT_DEPTH
    depth = clamp_depth(depth)
    check_side_length(side_length)
    orientation = coerce_orientation(orientation)
    start = _start_corner(Point(*center), side_length, orientation)
    step = side_length/2**depth
    path = [Move(start.x, start.y)]
    point = start
    angle = _initial_heading(depth)
    for cmd in arrowhead_lsystem(depth):
        if cmd == 'F':
            point = next_point(point, step, orientation*angle)
            path.append(Line(point.x, point.y))
        elif cmd == '+':
            angle = normalize_angle(angle + RADIANS_60_DEGREES)
        else:
            angle = normalize_angle(angle - RADIANS_60_DEGREES)
    return path
