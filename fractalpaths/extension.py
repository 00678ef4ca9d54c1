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

import functools
import random
import inkex
from inkex.localization import inkex_gettext as _
from .geometry import Point
from .layout import LevelCounter, draw_fractal_row
from .options import EdgeStyle, FractalOptions, Strategy, TIGHTENER
from .pythagoras_tree import SQUARE_SEGMENTS, get_pythagoras_tree, \
    random_catmull_rom_edge
from .renderer import DEFAULT_BRANCH_INTERVAL, DEFAULT_INTERVAL, reveal, \
    reveal_branched
from .sierpinski import get_sierpinski_arrowhead_curve, \
    get_sierpinski_triangle
from .surface import SvgSurface

FRACTAL_NAMES = ['sierpinski-triangle',
                 'sierpinski-arrowhead',
                 'pythagoras-tree']

# Vertical distance (px) from the bottom of a cell to a tree's level
# counter.
LEVEL_COUNTER_MARGIN = 4


# ----------------------------------------------------------------------

# Each fractal is described by a generator, a base shape drawn beneath it,
# and a renderer.  All three are built from a FractalOptions.

def _triangle_base(center, size, depth, orientation):
    return get_sierpinski_triangle(center, size, 0, orientation)


def _sierpinski_triangle(opts, interval):
    def generate(center, size, depth, orientation):
        return get_sierpinski_triangle(center, size, depth, orientation,
                                       opts.strategy, opts.level_change)

    def render(surface, fractal):
        return reveal(surface, fractal.path, interval or DEFAULT_INTERVAL)
    return generate, _triangle_base, render


def _sierpinski_arrowhead(opts, interval):
    def generate(center, size, depth, orientation):
        return get_sierpinski_arrowhead_curve(center, size, depth,
                                              orientation)

    def render(surface, fractal):
        return reveal(surface, fractal.path, interval or DEFAULT_INTERVAL)
    return generate, _triangle_base, render


def _trunk(center, size, orientation):
    '''Return the center and side length of the trunk square that fits a
    tree into a cell.  A tree is about six trunks wide and four high.'''
    side = size/6
    return Point(center.x, center.y + orientation*1.5*side), side


def _pythagoras_tree(opts, interval, show_levels=False, rng=None):
    edge = opts.edge
    if edge == EdgeStyle.CATMULL_ROM_RANDOM and rng is not None:
        edge = functools.partial(random_catmull_rom_edge, rng=rng)

    def generate(center, size, depth, orientation):
        trunk_center, side = _trunk(center, size, orientation)
        return get_pythagoras_tree(trunk_center, side, depth, orientation,
                                   edge, opts.tightener)

    def base(center, size, depth, orientation):
        trunk_center, side = _trunk(center, size, orientation)
        return get_pythagoras_tree(trunk_center, side, 1, orientation)

    def render(surface, fractal):
        counter = None
        if show_levels:
            counter = LevelCounter(surface,
                                   (fractal.center.x - fractal.size/2,
                                    surface.height - LEVEL_COUNTER_MARGIN))
        reveal_branched(surface, fractal.path, SQUARE_SEGMENTS,
                        interval or DEFAULT_BRANCH_INTERVAL, counter)
        return counter
    return generate, base, render


def fractal_functions(name, opts, interval=None, **kwargs):
    '''Return the generator, base-shape, and render functions for a named
    fractal.'''
    if name == 'sierpinski-triangle':
        return _sierpinski_triangle(opts, interval)
    if name == 'sierpinski-arrowhead':
        return _sierpinski_arrowhead(opts, interval)
    if name == 'pythagoras-tree':
        return _pythagoras_tree(opts, interval, **kwargs)
    raise inkex.AbortExtension(_('Unknown fractal "%s"') % name)


# ----------------------------------------------------------------------

class FractalPaths(inkex.EffectExtension):
    'Draw an animated row of fractals of increasing depth.'

    def add_arguments(self, pars):
        'Process program parameters passed in from the UI.'
        pars.add_argument('--tab', dest='tab',
                          help='The selected UI tab when OK was pressed')
        pars.add_argument('--fractal', choices=FRACTAL_NAMES,
                          default='sierpinski-triangle',
                          help='Fractal to draw')
        pars.add_argument('--count', type=int, default=4,
                          help='Number of fractals in the row')
        pars.add_argument('--max-depth', type=int, default=6,
                          help='Depth of recursion to work up to')
        pars.add_argument('--orientation', type=int, default=1,
                          choices=[1, -1],
                          help='Orientation of the first fractal in the row')
        pars.add_argument('--strategy', default=Strategy.RECURSIVE.value,
                          choices=[s.value for s in Strategy],
                          help='Order in which to draw triangles')
        pars.add_argument('--edge', default=EdgeStyle.STRAIGHT.value,
                          choices=[e.value for e in EdgeStyle],
                          help='Shape of the edges of tree squares')
        pars.add_argument('--level-change', default='1,1,1',
                          help='Depth consumed by the left, right, and '
                               'vertical children of each triangle')
        pars.add_argument('--interval', type=int, default=0,
                          help='Milliseconds per animation step'
                               ' (0 for the default)')
        pars.add_argument('--tightener', type=float, default=TIGHTENER,
                          help='Scale applied to the distance between '
                               'tree squares')
        pars.add_argument('--seed', type=int, default=None,
                          help='Seed for randomly curved tree edges')
        pars.add_argument('--show-levels', type=inkex.Boolean, default=True,
                          help='Display the level a tree has reached')
        pars.add_argument('--verbose', type=inkex.Boolean, default=False,
                          help='Report what was drawn')

    def effect(self):
        'Draw the fractals and schedule their animation.'
        opts = FractalOptions.from_arguments(self.options)
        extra = {}
        if self.options.fractal == 'pythagoras-tree':
            extra['show_levels'] = self.options.show_levels
            if self.options.seed is not None:
                extra['rng'] = random.Random(self.options.seed)
        generate, base, render = fractal_functions(self.options.fractal,
                                                   opts,
                                                   self.options.interval,
                                                   **extra)
        surface = SvgSurface(self.svg)
        fractals = draw_fractal_row(surface, self.options.count,
                                    opts.depth, generate, base,
                                    render, orientation=opts.orientation)
        finish = surface.run()
        if self.options.verbose:
            for f in fractals:
                inkex.utils.debug(_('%s: depth %d, %d segments') %
                                  (self.options.fractal, f.depth,
                                   len(f.path)))
            inkex.utils.debug(_('Animation ends after %.10g ms') % finish)
        self.fractals = fractals


def main():
    FractalPaths().run()


if __name__ == '__main__':
    main()
