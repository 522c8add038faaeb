GRID_ROWS = 8
GRID_COLS = 8

# Window size used by the scanners and the run length needed for a match.
MATCH_LENGTH = 3

# Empty cell marker. Only this value counts as empty; falsy pieces are real pieces.
EMPTY = None

# Default palette for randomly generated boards.
PIECE_TYPES = [
    'nature', 'blood', 'shapeshift', 'spirit', 'hex', 'secrets', 'witchfire'
]

# Character used by text layouts for an empty cell.
LAYOUT_EMPTY_CHAR = '.'
