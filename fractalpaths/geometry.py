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
import math
import inkex
from inkex.localization import inkex_gettext as _
from inkex.paths import Line
from .errors import InvalidAngle, InvalidParameter

# ----------------------------------------------------------------------

# Angles are always expressed in radians.  These are the ones the
# fractal generators turn by.
RADIANS_45_DEGREES = (2*math.pi)/8
RADIANS_60_DEGREES = (2*math.pi)/6
RADIANS_90_DEGREES = 2*RADIANS_45_DEGREES
RADIANS_120_DEGREES = 2*RADIANS_60_DEGREES
RADIANS_180_DEGREES = 3*RADIANS_60_DEGREES
RADIANS_360_DEGREES = 2*math.pi


class Point(collections.namedtuple('Point', ['x', 'y'])):
    'Represent an immutable point on the plane.'

    __slots__ = ()

    def __repr__(self):
        return 'Point(%.10g, %.10g)' % (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


def rotate_point(point, angle, center=ORIGIN):
    '''Rotate a point about a center by an angle.  This applies the
    rotation matrix

        | cos(angle)  -sin(angle) |
        | sin(angle)   cos(angle) |

    to the point after translating the center to the origin.'''
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(dx*cos_a - dy*sin_a + center[0],
                 dx*sin_a + dy*cos_a + center[1])


def translate_point(point, distance, angle):
    'Return the point a given distance away along a given heading.'
    return Point(point[0] + distance*math.cos(angle),
                 point[1] + distance*math.sin(angle))


def next_point(point, distance, angle):
    '''Return the point a given distance away along a given heading,
    which must lie within one full turn in either direction.'''
    if angle > RADIANS_360_DEGREES or angle < -RADIANS_360_DEGREES:
        inkex.utils.errormsg(_('next_point called with bad angle %r') % angle)
        raise InvalidAngle(angle)
    return translate_point(point, distance, angle)


def normalize_angle(angle):
    'Return the heading equivalent to an angle that lies in [-pi, pi].'
    return math.remainder(angle, RADIANS_360_DEGREES)


def triangle_height(angle, hypotenuse):
    'Return the height of a right triangle opposite the given angle.'
    return hypotenuse*math.sin(angle)


def append_line(path, point):
    'Return a new path that ends with a line to the given point.'
    return path + [Line(point[0], point[1])]


def segment_end(segment):
    'Return the final point of an absolute path segment.'
    x, y = segment.args[-2:]
    return Point(x, y)


# ----------------------------------------------------------------------

# The following functions normalize the parameters every generator
# accepts.

def coerce_orientation(orientation):
    'Map anything other than +1 or -1 to +1.'
    if orientation == -1:
        return -1
    return 1


def clamp_depth(depth):
    'Treat a negative recursion depth as zero.'
    return max(int(depth), 0)


def check_side_length(side_length):
    'Abort if a side length is not strictly positive.'
    if not side_length > 0:
        raise InvalidParameter(_('side length must be positive, not %r') %
                               (side_length,))
    return side_length
