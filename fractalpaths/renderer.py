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
from inkex.localization import inkex_gettext as _
from .errors import InvalidParameter

# Time (ms) each step of a reveal takes unless told otherwise.
DEFAULT_INTERVAL = 300
DEFAULT_BRANCH_INTERVAL = 1000

# Style of the squares drawn by a branched reveal.
MAGENTA = '#330033'
_branch_style = {'stroke': MAGENTA, 'stroke_width': 2}


def reveal(surface, segments, interval=DEFAULT_INTERVAL, **style):
    '''Draw a path one segment at a time.  The first segment is drawn
    immediately.  Each later segment is added by an animation that starts
    only once the previous one has completed.  Return the path's handle,
    or None if there was nothing to draw.'''
    if len(segments) == 0:
        return None
    handle = surface.path(segments[:1], **style)
    _reveal_next(surface, handle, segments, 1, interval)
    return handle


def _reveal_next(surface, handle, segments, index, interval):
    'Animate the path from its first index segments to its first index+1.'
    if index >= len(segments):
        return
    surface.animate(handle, segments[:index + 1], interval,
                    lambda: _reveal_next(surface, handle, segments,
                                         index + 1, interval))


def split_index(start, end, group_size):
    '''Return the index at which the groups following the one at start
    divide into a left and a right subtree: the midpoint of the range,
    rounded up to a group boundary.'''
    offset = (start + end)//2 - start
    return start + group_size*int(math.ceil(offset/group_size))


def reveal_branched(surface, segments, group_size=6,
                    interval=DEFAULT_BRANCH_INTERVAL, on_level_enter=None,
                    **style):
    '''Draw a path that encodes a binary tree, one group of group_size
    segments per node, in depth-first (node, left, right) order.  Each
    node grows out of its first segment; once it is drawn, both of its
    children are started at the same time.  on_level_enter, if given, is
    called with a node's level (1 for the root) just before the node
    starts to animate.'''
    if group_size < 1:
        raise InvalidParameter(_('group size must be positive, not %r') %
                               (group_size,))
    style = dict(_branch_style, **style)
    _reveal_group(surface, segments, 0, len(segments), group_size,
                  interval, on_level_enter, 1, style)


def _reveal_group(surface, segments, start, end, group_size, interval,
                  on_level_enter, level, style):
    'Draw the group at start, then the two subtrees in [start, end).'
    if start + group_size > end:
        return
    if on_level_enter is not None:
        on_level_enter(level)
    group = segments[start:start + group_size]
    handle = surface.path(group[:1], **style)

    def draw_children():
        middle = split_index(start, end, group_size)
        _reveal_group(surface, segments, start + group_size, middle,
                      group_size, interval, on_level_enter, level + 1, style)
        _reveal_group(surface, segments, middle, end,
                      group_size, interval, on_level_enter, level + 1, style)

    surface.animate(handle, group, interval, draw_children)
