from falling_blocks.game import GameGrid, Piece, TetrominoType, rotate_with_kicks


def test_rotation_in_open_space_keeps_position():
    grid = GameGrid(10, 20)
    result = rotate_with_kicks(grid, Piece(TetrominoType.T), 4, 5)
    assert result == (Piece(TetrominoType.T, 1), 4, 5)


def test_left_wall_kicks_right_never_left():
    grid = GameGrid(10, 20)
    # T pointing right sits in box columns 1-2, so x=-1 is flush with the wall
    piece = Piece(TetrominoType.T, 1)
    piece, x, y = rotate_with_kicks(grid, piece, -1, 5)
    assert (piece.rotation, x, y) == (2, 0, 5)


def test_right_wall_prefers_left_kick():
    grid = GameGrid(10, 20)
    # T pointing left sits in box columns 0-1, flush right at x=8
    piece, x, y = rotate_with_kicks(grid, Piece(TetrominoType.T, 3), 8, 5)
    assert (piece.rotation, x, y) == (0, 7, 5)


def test_blocked_rotation_is_rejected():
    grid = GameGrid(10, 20)
    grid.set_cell(2, 11, 1)
    assert rotate_with_kicks(grid, Piece(TetrominoType.T, 1), -1, 10) is None
