#####################################################################
# Draw a row of Sierpinski triangles of increasing depth, each one  #
# revealed a segment at a time, and write the animated SVG to       #
# sierpinski_row.svg.                                               #
#####################################################################

from fractalpaths import SvgSurface, Strategy, draw_fractal_row, \
    get_sierpinski_triangle, reveal


def triangle(center, size, depth, orientation):
    return get_sierpinski_triangle(center, size, depth, orientation,
                                   Strategy.ITERATIVE)


def outline(center, size, depth, orientation):
    return get_sierpinski_triangle(center, size, 0, orientation)


surface = SvgSurface.new(820, 300)
draw_fractal_row(surface, 4, 5, triangle, outline,
                 lambda s, f: reveal(s, f.path, 150, stroke='#000080'))
print('Animation ends after %g ms' % surface.run())
surface.save('sierpinski_row.svg')
