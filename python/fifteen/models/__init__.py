from fifteen.models.board import (
    Board,
    Direction,
    IllegalMoveError,
    InvalidBoardError,
    Tile,
)

__all__ = ["Board", "Direction", "IllegalMoveError", "InvalidBoardError", "Tile"]
