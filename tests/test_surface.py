##################################################
# Define a set of unit tests for the SVG drawing #
# surface and its animation event loop.          #
##################################################

from fractalpaths.errors import AnimationInFlight, InvalidParameter
from fractalpaths.geometry import Point
from fractalpaths.surface import SvgSurface, grow_from
from inkex.paths import Arc, Line, Move
from inkex.tester import TestCase
import inkex
import os


class SurfaceTestDocument(TestCase):
    'Test document-level operations.'

    def test_new(self):
        surface = SvgSurface.new(400, 200)
        self.assertEqual(surface.width, 400)
        self.assertEqual(surface.height, 200)
        self.assertEqual(surface.now, 0)

    def test_attach_to_layer(self):
        svg = inkex.load_svg(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
            'viewBox="0 0 100 100">'
            '<g id="layer1" inkscape:groupmode="layer"/></svg>').getroot()
        surface = SvgSurface(svg)
        handle = surface.path([Move(0, 0), Line(1, 1)])
        self.assertEqual(handle.get_inkex_object().getparent().get('id'),
                         'layer1')

    def test_tostring(self):
        surface = SvgSurface.new(100, 100)
        surface.path([Move(0, 0), Line(1, 1)])
        self.assertIn('<path', surface.tostring())

    def test_save(self):
        surface = SvgSurface.new(100, 100)
        surface.path([Move(0, 0), Line(1, 1)])
        fname = os.path.join(self.tempdir, 'saved.svg')
        surface.save(fname)
        svg = inkex.load_svg(fname).getroot()
        self.assertEqual(len(svg.xpath('//svg:path')), 1)

    def test_object_svg(self):
        handle = SvgSurface.new(100, 100).path([Move(0, 0), Line(1, 1)])
        self.assertTrue(handle.svg().startswith('<path'))
        self.assertIn('xmlns', handle.svg(xmlns=True))

    def test_empty_path(self):
        with self.assertRaises(InvalidParameter):
            SvgSurface.new(10, 10).path([])


class SurfaceTestObjects(TestCase):
    'Test drawing, styling, and transforming objects.'

    def setUp(self):
        super().setUp()
        self.surface = SvgSurface.new(100, 100)

    def test_path_style(self):
        handle = self.surface.path([Move(0, 0), Line(5, 5)],
                                   stroke='red', stroke_width=2)
        style = handle.get_inkex_object().style
        self.assertEqual(style.get('stroke'), 'red')
        self.assertEqual(style.get('stroke-width'), '2')
        self.assertEqual(style.get('fill'), 'none')
        handle.style(stroke='blue')
        self.assertEqual(handle.get_inkex_object().style.get('stroke'),
                         'blue')

    def test_path_segments(self):
        handle = self.surface.path([Move(0, 0), Line(5, 5)])
        letters = [s.letter for s in handle.get_inkex_object().path]
        self.assertEqual(letters, ['M', 'L'])

    def test_rotate(self):
        handle = self.surface.path([Move(0, 0), Line(5, 5)])
        handle.rotate(90, (0, 0))
        pt = handle.transform.apply_to_point((1, 0))
        self.assertAlmostEqual(pt.x, 0)
        self.assertAlmostEqual(pt.y, 1)

    def test_translate(self):
        handle = self.surface.path([Move(0, 0), Line(5, 5)])
        handle.translate((3, 4))
        pt = handle.transform.apply_to_point((1, 1))
        self.assertAlmostEqual(pt.x, 4)
        self.assertAlmostEqual(pt.y, 5)

    def test_clone(self):
        handle = self.surface.path([Move(0, 0), Line(5, 5)])
        c = self.surface.clone(handle)
        use = c.get_inkex_object()
        self.assertEqual(use.get('xlink:href'),
                         '#' + handle.get_inkex_object().get_id())

    def test_text_window(self):
        t = self.surface.text('Level 1', (5, 95), begin=100, end=250)
        obj = t.get_inkex_object()
        self.assertEqual(obj.text, 'Level 1')
        self.assertEqual(obj.get('visibility'), 'hidden')
        changes = [(s.get('to'), s.get('begin')) for s in obj]
        self.assertEqual(changes, [('visible', '100ms'), ('hidden', '250ms')])

    def test_plain_text(self):
        t = self.surface.text('hello', (0, 0))
        self.assertIsNone(t.get_inkex_object().get('visibility'))


class SurfaceTestAnimation(TestCase):
    'Test animations and the completion event loop.'

    def setUp(self):
        super().setUp()
        self.surface = SvgSurface.new(100, 100)

    def test_grow_from(self):
        grown = grow_from([Move(0, 0), Line(2, 3)],
                          [Move(0, 0), Line(2, 3), Line(9, 9), Move(4, 4)])
        self.assertEqual([tuple(s.args) for s in grown],
                         [(0, 0), (2, 3), (2, 3), (2, 3)])
        self.assertEqual([s.letter for s in grown], list('MLLM'))

    def test_grow_from_arc(self):
        grown = grow_from([Move(1, 1)], [Move(1, 1), Arc(5, 5, 0, 1, 1, 8, 8)])
        self.assertEqual([float(v) for v in grown[1].args],
                         [5, 5, 0, 1, 1, 1, 1])

    def test_animate_element(self):
        handle = self.surface.path([Move(0, 0)])
        self.surface.animate(handle, [Move(0, 0), Line(10, 0)], 300)
        anims = handle.animations()
        self.assertEqual(len(anims), 1)
        anim = anims[0]
        self.assertEqual(anim.get('attributeName'), 'd')
        self.assertEqual(anim.get('begin'), '0ms')
        self.assertEqual(anim.get('dur'), '300ms')
        self.assertEqual(anim.get('fill'), 'freeze')
        before, after = anim.get('values').split(';')
        self.assertEqual(inkex.Path(before.strip())[-1].letter, 'L')
        self.assertEqual(len(inkex.Path(after.strip())), 2)

    def test_extension_adds_piece(self):
        handle = self.surface.path([Move(0, 0), Line(4, 0)], stroke='red')
        self.surface.animate(handle,
                             [Move(0, 0), Line(4, 0), Line(4, 3), Line(0, 3)],
                             100)
        self.assertEqual(len(handle.pieces), 1)
        piece = handle.pieces[0]
        self.assertIs(handle.get_inkex_object().getnext(), piece)
        self.assertEqual(piece.style.get('stroke'), 'red')

        # Only the added segments are written, starting from the pen.
        anim = piece[0]
        before, after = [inkex.Path(v.strip())
                         for v in anim.get('values').split(';')]
        self.assertEqual([tuple(s.args) for s in after],
                         [(4, 0), (4, 3), (0, 3)])
        self.assertEqual([tuple(s.args) for s in before],
                         [(4, 0), (4, 0), (4, 0)])
        self.assertEqual(len(handle.get_inkex_object().path), 2)
        self.assertEqual(len(handle.segments), 4)

    def test_pieces_in_order(self):
        handle = self.surface.path([Move(0, 0)])
        path = [Move(0, 0), Line(1, 0), Line(2, 0), Line(3, 0)]

        def step(n):
            if n <= len(path):
                self.surface.animate(handle, path[:n], 10,
                                     lambda: step(n + 1))

        step(2)
        self.surface.run()
        self.assertEqual(len(handle.pieces), 3)
        elt = handle.get_inkex_object()
        for piece in handle.pieces:
            elt = elt.getnext()
            self.assertIs(elt, piece)
        ends = [inkex.Path(p[0].get('values').split(';')[1])[-1].args[0]
                for p in handle.pieces]
        self.assertEqual(ends, [1, 2, 3])

    def test_pieces_follow_style_and_transform(self):
        handle = self.surface.path([Move(0, 0)])
        handle.translate((5, 0))
        self.surface.animate(handle, [Move(0, 0), Line(1, 1)], 10)
        piece = handle.pieces[0]
        pt = piece.transform.apply_to_point((1, 1))
        self.assertAlmostEqual(pt.x, 6)
        self.assertAlmostEqual(pt.y, 1)
        handle.style(stroke='blue')
        handle.rotate(90, (0, 0))
        self.assertEqual(piece.style.get('stroke'), 'blue')
        pt = piece.transform.apply_to_point((1, 0))
        self.assertAlmostEqual(pt.x, 0)
        self.assertAlmostEqual(pt.y, 6)

    def test_replacement_animates_whole_path(self):
        handle = self.surface.path([Move(0, 0), Line(5, 5), Line(9, 0)])
        self.surface.animate(handle, [Move(0, 0), Line(2, 2)], 10)
        self.assertEqual(handle.pieces, [])
        anims = handle.animations()
        self.assertEqual(len(anims), 1)
        self.assertIs(anims[0].getparent(), handle.get_inkex_object())

    def test_completion(self):
        handle = self.surface.path([Move(0, 0)])
        done = []
        self.surface.animate(handle, [Move(0, 0), Line(1, 0)], 250,
                             lambda: done.append(self.surface.now))
        self.assertTrue(handle.in_flight)
        self.assertEqual(self.surface.pending(), 1)
        self.assertEqual(self.surface.run(), 250)
        self.assertEqual(done, [250])
        self.assertFalse(handle.in_flight)
        self.assertEqual(self.surface.pending(), 0)

    def test_in_flight(self):
        handle = self.surface.path([Move(0, 0)])
        self.surface.animate(handle, [Move(0, 0), Line(1, 0)], 100)
        with self.assertRaises(AnimationInFlight):
            self.surface.animate(handle,
                                 [Move(0, 0), Line(1, 0), Line(2, 0)], 100)

    def test_time_order(self):
        order = []
        slow = self.surface.path([Move(0, 0)])
        fast = self.surface.path([Move(0, 0)])
        tie = self.surface.path([Move(0, 0)])
        self.surface.animate(slow, [Move(0, 0), Line(1, 0)], 100,
                             lambda: order.append('slow'))
        self.surface.animate(fast, [Move(0, 0), Line(1, 0)], 50,
                             lambda: order.append('fast'))
        self.surface.animate(tie, [Move(0, 0), Line(1, 0)], 100,
                             lambda: order.append('tie'))
        self.surface.run()
        self.assertEqual(order, ['fast', 'slow', 'tie'])

    def test_chained_begin_times(self):
        handle = self.surface.path([Move(0, 0)])
        path = [Move(0, 0), Line(1, 0), Line(2, 0)]

        def second():
            self.surface.animate(handle, path, 40)

        self.surface.animate(handle, path[:2], 60, second)
        self.surface.run()
        self.assertEqual([a.get('begin') for a in handle.animations()],
                         ['0ms', '60ms'])
        self.assertEqual([(e.begin, e.duration)
                          for e in self.surface.timeline],
                         [(0, 60), (60, 40)])
        self.assertEqual(self.surface.now, 100)
