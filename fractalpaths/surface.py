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
import heapq
import itertools
import lxml
import inkex
from inkex.localization import inkex_gettext as _
from inkex.paths import Arc, Move
from .errors import AnimationInFlight, InvalidParameter
from .geometry import segment_end

# ----------------------------------------------------------------------

# The following classes are needed only until inkex gets around to
# providing its own versions.

class Animate(inkex.BaseElement):
    'Represent an <animate> element.'
    tag_name = 'animate'


class Set(inkex.BaseElement):
    'Represent a <set> element.'
    tag_name = 'set'


# ----------------------------------------------------------------------

# Most shapes use this as their default style.
_common_shape_style = {'stroke': 'black',
                       'fill': 'none'}

# Start from this document when no SVG is supplied.
_empty_svg = ('<svg xmlns="http://www.w3.org/2000/svg" '
              'xmlns:xlink="http://www.w3.org/1999/xlink" '
              'width="%s" height="%s" viewBox="0 0 %s %s"></svg>')

# One animation recorded on the surface's timeline.
TimelineEntry = collections.namedtuple('TimelineEntry',
                                       ['begin', 'duration', 'handle'])


def _python_to_svg_str(val):
    'Convert a Python value to a string suitable for use in an SVG attribute.'
    if isinstance(val, str):
        # Strings are used unmodified
        return val
    if isinstance(val, bool):
        # Booleans are converted to lowercase strings.
        return str(val).lower()
    if isinstance(val, float):
        # Floats are converted using a fair number of significant digits.
        return '%.10g' % val
    try:
        # Each element of a sequence (other than strings, which were
        # handled above) is converted recursively.
        return ' '.join([_python_to_svg_str(v) for v in val])
    except TypeError:
        pass  # Not a sequence
    return str(val)  # Everything else is converted to a string as usual.


def _clock_str(ms):
    'Express a number of milliseconds as an SMIL clock value.'
    return _python_to_svg_str(float(ms)) + 'ms'


def _construct_style(base_style, new_style):
    '''Combine a shape default style and an object-specific style and
    return the result as a string.'''
    style = base_style.copy()
    for k, v in new_style.items():
        k = k.replace('_', '-')
        if v is None:
            style[k] = None
        else:
            style[k] = _python_to_svg_str(v)

    # Remove all keys whose value is None.
    style = {k: v for k, v in style.items() if v is not None}
    return ';'.join(['%s:%s' % kv for kv in style.items()])


def _collapse(segment, pen):
    '''Return a segment of the same type as the given one but with every
    point it names moved to the pen position.'''
    if isinstance(segment, Arc):
        return Arc(*(tuple(segment.args[:5]) + (pen.x, pen.y)))
    npoints = len(segment.args)//2
    return type(segment)(*([pen.x, pen.y]*npoints))


def grow_from(current, target):
    '''Return a path with the same commands as target in which every
    segment beyond those of current has collapsed onto the pen.
    Animating from this path to target makes the new segments appear to
    grow out of the end of the old ones.'''
    if len(target) <= len(current) or len(target) == 0:
        return list(current)
    if current:
        pen = segment_end(current[-1])
    else:
        pen = segment_end(target[0])
    return list(current) + [_collapse(s, pen) for s in target[len(current):]]


# ----------------------------------------------------------------------

class SVGOutputMixin():
    '''Provide an svg method for converting an underlying inkex object to
    a string.'''

    def svg(self, xmlns=False):
        '''Return our underlying inkex object as a string, optionally with
        namespace declarations so it can stand alone.'''
        obj = self.get_inkex_object()
        if xmlns:
            return lxml.etree.tostring(obj, encoding='unicode')
        return obj.tostring().decode('utf-8')


class SurfaceObject(SVGOutputMixin):
    'Encapsulate an object drawn on an SvgSurface.'

    def __init__(self, surface, obj, base_style, obj_style):
        ext_style = _construct_style(base_style, obj_style)
        if ext_style != '':
            obj.style = ext_style
        self._inkscape_obj = obj
        self._transform = inkex.Transform()
        self.surface = surface
        surface._attach.append(obj)

    def __repr__(self):
        'Return a unique description of the object as a string.'
        iobj = self.get_inkex_object()
        return '<%s %s %s>' % (self.__class__.__name__,
                               iobj.TAG,
                               iobj.get_id())

    def get_inkex_object(self):
        "Return the object's underlying inkex object."
        return self._inkscape_obj

    def style(self, **style):
        'Merge new style properties into the existing ones.'
        obj = self._inkscape_obj
        ext_style = _construct_style(dict(obj.style.items()), style)
        obj.style = ext_style
        return self

    def _find_transform_point(self, anchor):
        'Return the point about which to rotate.'
        if anchor == 'center':
            bbox = self._inkscape_obj.bounding_box()
            if bbox is None:
                return inkex.Vector2d()
            return bbox.center
        return inkex.Vector2d(anchor[0], anchor[1])

    def _multiply_transform(self, tr):
        try:
            # Inkscape 1.2+
            self._transform = tr @ self._transform
        except TypeError:
            # Inkscape 1.1
            self._transform = tr * self._transform
        self._inkscape_obj.transform = self._transform

    def translate(self, dist):
        'Apply a translation transformation.'
        tr = inkex.Transform()
        tr.add_translate(dist[0], dist[1])
        self._multiply_transform(tr)
        return self

    def rotate(self, angle, anchor='center'):
        '''Apply a rotation transformation (angle in degrees), optionally
        around a given point.'''
        tr = inkex.Transform()
        anchor = self._find_transform_point(anchor)
        tr.add_rotate(angle, anchor.x, anchor.y)
        self._multiply_transform(tr)
        return self

    @property
    def transform(self):
        "Return the object's current transformation as an inkex.Transform."
        return self._transform

    def show_between(self, begin=None, end=None):
        '''Make the object visible only from begin until end, both in
        milliseconds of surface time.'''
        obj = self._inkscape_obj
        if begin is not None:
            obj.set('visibility', 'hidden')
            obj.append(self._visibility_change('visible', begin))
        if end is not None:
            obj.append(self._visibility_change('hidden', end))
        return self

    @staticmethod
    def _visibility_change(value, when):
        vis = Set()
        vis.set('attributeName', 'visibility')
        vis.set('to', value)
        vis.set('begin', _clock_str(when))
        vis.set('fill', 'freeze')
        return vis


class SurfacePath(SurfaceObject):
    '''Encapsulate a path drawn on an SvgSurface.  Segments added to the
    path by an animation are drawn by separate <path> elements, called
    pieces, that follow the original one in the document.'''

    def __init__(self, surface, segments, base_style, obj_style):
        obj = inkex.PathElement()
        obj.path = inkex.Path(segments)
        super().__init__(surface, obj, base_style, obj_style)
        self.segments = list(segments)
        self.pieces = []
        self.in_flight = False

    def style(self, **style):
        'Merge new style properties into the path and all of its pieces.'
        super().style(**style)
        for piece in self.pieces:
            piece.style = str(self._inkscape_obj.style)
        return self

    def _multiply_transform(self, tr):
        super()._multiply_transform(tr)
        for piece in self.pieces:
            piece.transform = self._transform

    def add_piece(self, segments):
        '''Add an element that draws further segments in the path's style.
        The element starts out collapsed onto its first point.'''
        piece = inkex.PathElement()
        piece.path = inkex.Path(grow_from(segments[:1], segments))
        piece.style = str(self._inkscape_obj.style)
        if self._inkscape_obj.get('transform') is not None:
            piece.transform = self._transform
        if self.pieces:
            self.pieces[-1].addnext(piece)
        else:
            self._inkscape_obj.addnext(piece)
        self.pieces.append(piece)
        return piece

    def animations(self):
        '''Return the <animate> elements of the path and then those of its
        pieces, each in the order they were added.'''
        tag = inkex.addNS('animate', 'svg')
        return [a
                for elt in [self._inkscape_obj] + self.pieces
                for a in elt
                if a.tag == tag]


class SurfaceClone(SurfaceObject):
    'Encapsulate a linked clone of another object.'


# ----------------------------------------------------------------------

class SvgSurface():
    '''Draw paths on an SVG document and animate them with SMIL.

    Time on the surface is simulated.  Each call to animate starts an
    animation at the current time and queues its completion; run pops
    completions in time order, advancing the clock and invoking their
    callbacks.  Callbacks may start further animations.'''

    def __init__(self, svg_root):
        self._svg = svg_root
        self._attach = self.find_attach_point()
        self._queue = []
        self._sequence = itertools.count()
        self.now = 0.0
        self.timeline = []

    @classmethod
    def new(cls, width, height):
        'Create a surface on an empty document of a given size.'
        svg = inkex.load_svg(_empty_svg % (width, height, width, height))
        return cls(svg.getroot())

    def find_attach_point(self):
        '''Return a suitable point in the SVG XML tree at which to attach
        new objects.'''
        # The Inkscape GUI automatically adds a <sodipodi:namedview> element
        # with an inkscape:current-layer attribute, and this will name either
        # an actual layer or the <svg> element itself.  In this case, we return
        # the layer pointed to by inkscape:current-layer.
        svg = self._svg
        try:
            namedview = svg.findone('sodipodi:namedview')
            cur_layer_name = namedview.get('inkscape:current-layer')
            cur_layer = svg.xpath('//*[@id="%s"]' % cur_layer_name)[0]
            return cur_layer
        except (AttributeError, IndexError):
            pass

        # An input SVG file may lack a <sodipodi:namedview> element.  In
        # this case, we return the topmost layer.
        try:
            return svg.xpath('//svg:g[@inkscape:groupmode="layer"]')[-1]
        except IndexError:
            pass

        # A very minimal SVG input may contain no layers at all.  In this case,
        # we return the top-level <svg> element.
        return svg

    @property
    def svg_root(self):
        'Return the underlying SVG document element.'
        return self._svg

    @property
    def viewbox(self):
        'Return the viewbox as a list of four floats.'
        vbox = self._svg.get_viewbox()
        if vbox == [0, 0, 0, 0]:
            try:
                # Inkscape 1.2+
                vbox = [0, 0, self._svg.viewport_width,
                        self._svg.viewport_height]
            except AttributeError:
                # Inkscape 1.1
                vbox = [0, 0, self._svg.width, self._svg.height]
        return vbox

    @property
    def width(self):
        'Return the width of the viewbox in user units.'
        return self.viewbox[2]

    @property
    def height(self):
        'Return the height of the viewbox in user units.'
        return self.viewbox[3]

    # ------------------------------------------------------------------

    def path(self, segments, **style):
        'Draw a path and return a handle to it.'
        if len(segments) == 0:
            raise InvalidParameter(_('A path must contain at least one '
                                     'path element.'))
        return SurfacePath(self, segments, _common_shape_style, style)

    def text(self, msg, base, begin=None, end=None, **style):
        '''Place a piece of text, optionally visible only during a window of
        surface time.'''
        obj = inkex.TextElement(x=_python_to_svg_str(base[0]),
                                y=_python_to_svg_str(base[1]))
        obj.set('xml:space', 'preserve')
        obj.text = msg
        handle = SurfaceObject(self, obj, {}, style)
        return handle.show_between(begin, end)

    def clone(self, handle, **style):
        'Return a linked clone of a drawn object.'
        c = inkex.Use()
        i_obj = handle.get_inkex_object()
        c.href = i_obj.get_id()
        return SurfaceClone(self, c, {}, style)

    def animate(self, handle, segments, duration, callback=None):
        '''Animate a path from its current segments to a new list of
        segments over duration milliseconds, then invoke callback.  A list
        that is longer than the current one is taken to extend it: only
        the added segments are written out, as a new piece of the path
        that grows out of the pen position.  Anything else animates the
        whole path.'''
        if handle.in_flight:
            raise AnimationInFlight(_('%r is already being animated')
                                    % handle)
        current = handle.segments
        if 0 < len(current) < len(segments):
            pen = segment_end(current[-1])
            target = [Move(pen.x, pen.y)] + list(segments[len(current):])
            elt = handle.add_piece(target)
            start = grow_from(target[:1], target)
        else:
            target = segments
            elt = handle.get_inkex_object()
            start = grow_from(current, segments)
        anim = Animate()
        anim.set('attributeName', 'd')
        anim.set('values', '%s; %s' % (inkex.Path(start), inkex.Path(target)))
        anim.set('begin', _clock_str(self.now))
        anim.set('dur', _clock_str(duration))
        anim.set('fill', 'freeze')
        elt.append(anim)

        handle.segments = list(segments)
        handle.in_flight = True
        self.timeline.append(TimelineEntry(self.now, duration, handle))
        heapq.heappush(self._queue, (self.now + duration,
                                     next(self._sequence),
                                     handle, callback))
        return anim

    def pending(self):
        'Return the number of animations that have not yet completed.'
        return len(self._queue)

    def run(self):
        '''Complete every queued animation in time order.  Return the time
        at which the last one finished.'''
        while self._queue:
            when, _seq, handle, callback = heapq.heappop(self._queue)
            self.now = when
            handle.in_flight = False
            if callback is not None:
                callback()
        return self.now

    # ------------------------------------------------------------------

    def tostring(self):
        'Return the document as a string.'
        return self._svg.tostring().decode('utf-8')

    def save(self, file):
        'Write the document to a file name or a binary stream.'
        try:
            file.write(self._svg.tostring())
        except AttributeError:
            with open(file, 'wb') as fd:
                fd.write(self._svg.tostring())
