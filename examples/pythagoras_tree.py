####################################################################
# Grow a single Pythagoras tree with curved edges, one level at a  #
# time, and label the level being drawn.                           #
####################################################################

from fractalpaths import EdgeStyle, LevelCounter, Point, SvgSurface, \
    get_pythagoras_tree, reveal_branched

surface = SvgSurface.new(600, 500)
tree = get_pythagoras_tree(Point(300, 420), 70, depth=7,
                           edge=EdgeStyle.CATMULL_ROM)
counter = LevelCounter(surface, (10, 490), font_size='18px')
reveal_branched(surface, tree, on_level_enter=counter, interval=600)
surface.run()
surface.save('pythagoras_tree.svg')
