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
import enum
from dataclasses import dataclass, field
from inkex.localization import inkex_gettext as _
from .errors import InvalidParameter
from .geometry import clamp_depth, coerce_orientation

# Without this multiplier neighboring squares of a Pythagoras tree do
# not quite touch.
TIGHTENER = 0.96


class EdgeStyle(enum.Enum):
    'Shape of each edge of a Pythagoras tree square.'
    STRAIGHT = 'straight'
    CURVED = 'curved'
    ELLIPTICAL = 'elliptical'
    CATMULL_ROM = 'catmull-rom'
    CATMULL_ROM_RANDOM = 'catmull-rom-random'


class Strategy(enum.Enum):
    'Order in which the interior of a Sierpinski triangle is generated.'
    RECURSIVE = 'recursive'    # Subtree by subtree
    ITERATIVE = 'iterative'    # Level by level


class LevelChange(collections.namedtuple('LevelChange',
                                         ['left', 'right', 'vertical'])):
    '''Amount by which each child of a Sierpinski triangle decreases the
    remaining depth.'''

    __slots__ = ()

    def __new__(cls, left=1, right=1, vertical=1):
        for v in (left, right, vertical):
            if not isinstance(v, int) or v < 1:
                raise InvalidParameter(_('level changes must be positive '
                                         'integers, not %r') % (v,))
        return super().__new__(cls, left, right, vertical)

    @classmethod
    def parse(cls, text):
        'Parse a level change written as "left,right,vertical".'
        fields = text.replace(' ', '').split(',')
        if len(fields) != 3:
            raise InvalidParameter(_('expected three comma-separated level '
                                     'changes but saw "%s"') % text)
        try:
            values = [int(f) for f in fields]
        except ValueError:
            raise InvalidParameter(_('level changes must be integers: "%s"')
                                   % text) from None
        return cls(*values)

    def __str__(self):
        return '%d,%d,%d' % self


DEFAULT_LEVEL_CHANGE = LevelChange()


@dataclass
class FractalOptions:
    'Collect every knob that shapes a generated fractal.'
    depth: int = 3
    orientation: int = 1
    edge: EdgeStyle = EdgeStyle.STRAIGHT
    strategy: Strategy = Strategy.RECURSIVE
    level_change: LevelChange = field(default_factory=LevelChange)
    tightener: float = TIGHTENER

    def __post_init__(self):
        self.depth = clamp_depth(self.depth)
        self.orientation = coerce_orientation(self.orientation)
        self.edge = EdgeStyle(self.edge)
        self.strategy = Strategy(self.strategy)
        if not isinstance(self.level_change, LevelChange):
            self.level_change = LevelChange(*self.level_change)
        if not self.tightener > 0:
            raise InvalidParameter(_('the tightener must be positive, '
                                     'not %r') % (self.tightener,))

    @classmethod
    def from_arguments(cls, options):
        '''Construct a FractalOptions from the argparse namespace an
        extension produces.'''
        return cls(depth=options.max_depth,
                   orientation=options.orientation,
                   edge=EdgeStyle(options.edge),
                   strategy=Strategy(options.strategy),
                   level_change=LevelChange.parse(options.level_change),
                   tightener=options.tightener)
