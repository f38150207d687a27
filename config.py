# Drawing area of the tree, the unit square
SCALE_MIN = 0.0
SCALE_MAX = 1.0

# Vertical splits (x axis) in red, horizontal splits (y axis) in blue, points in black
VERTICAL_COLOR = 'red'
HORIZONTAL_COLOR = 'blue'
POINT_COLOR = 'black'
SPLIT_LINE_WIDTH = 1.0
POINT_SIZE = 20

LOGGER_NAME = 'kd_tree'
