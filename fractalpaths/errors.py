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

import inkex


class FractalError(inkex.AbortExtension):
    '''Base class for all errors raised while generating or drawing a
    fractal.  Deriving from inkex.AbortExtension lets an extension run
    report the message and stop cleanly.'''


class InvalidAngle(FractalError):
    'An angle lies outside the range a point can be derived from.'

    def __init__(self, angle):
        super().__init__('angle %r is outside [-2*pi, 2*pi]' % angle)
        self.angle = angle


class InvalidParameter(FractalError, ValueError):
    'A fractal parameter (side length, level change, count) is malformed.'


class AnimationInFlight(FractalError):
    'A handle was asked to animate before its previous animation ended.'
