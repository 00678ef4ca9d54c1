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
from inkex.localization import inkex_gettext as _
from .errors import InvalidParameter
from .geometry import Point, coerce_orientation
from .renderer import reveal

# Distance (px) between fractals and between a fractal and the side of
# the canvas.
BUFFER_SIZE = 10

# Stroke color of the shape each fractal is drawn on top of.
BASE_COLOR = 'gray'

# One fractal drawn by draw_fractal_row.
FractalInstance = collections.namedtuple('FractalInstance',
                                         ['center', 'size', 'depth',
                                          'orientation', 'path'])


def _round_half_up(x):
    return int(math.floor(x + 0.5))


def depth_increment(max_depth, fractal_count):
    'Return how much deeper each fractal in a row is than its predecessor.'
    return _round_half_up(max_depth/fractal_count)


def reveal_fractal(surface, fractal):
    "Reveal a fractal's path one segment at a time."
    return reveal(surface, fractal.path)


def draw_fractal_row(surface, fractal_count, max_depth, fractal_fn, base_fn,
                     render_fn=None, buffer_size=BUFFER_SIZE, orientation=1):
    '''Draw a row of fractals of increasing depth across the middle of a
    surface.  fractal_fn and base_fn are both called as fn(center, size,
    depth, orientation) and return a path.  The base path is drawn in gray
    and the fractal is handed to render_fn(surface, fractal_instance) to
    be drawn on top of it (by default, a segment at a time).  Orientation
    alternates from one fractal to the next, starting from the given
    orientation.  Return a list of FractalInstances.'''
    render_fn = render_fn or reveal_fractal
    if fractal_count < 1:
        raise InvalidParameter(_('at least one fractal must be drawn, '
                                 'not %r') % (fractal_count,))
    size = (surface.width - 2*buffer_size)/fractal_count
    if not size > 0:
        raise InvalidParameter(_('the surface is too narrow for %d '
                                 'fractals') % fractal_count)
    increment = depth_increment(max_depth, fractal_count)
    center = Point(buffer_size + size/2, surface.height/2)
    depth = 1
    orientation = coerce_orientation(orientation)
    fractals = []
    for _i in range(fractal_count):
        base = base_fn(center, size, depth, orientation)
        path = fractal_fn(center, size, depth, orientation)
        surface.path(base, stroke=BASE_COLOR)
        fractal = FractalInstance(center, size, depth, orientation, path)
        render_fn(surface, fractal)
        fractals.append(fractal)

        # Step right, flip, and go deeper.
        center = Point(center.x + size, center.y)
        orientation = -orientation
        depth += increment
    return fractals


class LevelCounter():
    '''Display the deepest level a branched reveal has reached.  Pass the
    counter's enter method as the reveal's on_level_enter.'''

    def __init__(self, surface, base, template='Level %d', **style):
        self.surface = surface
        self.base = base
        self.template = template
        self.style = style
        self.level = 0
        self._shown = None

    def enter(self, level):
        'Note that a level has started to animate.'
        if level <= self.level:
            return
        now = self.surface.now
        if self._shown is not None:
            self._shown.show_between(end=now)
        self.level = level
        self._shown = self.surface.text(self.template % level, self.base,
                                        begin=now, **self.style)

    __call__ = enter
