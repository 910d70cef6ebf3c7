"""
Static board geometry for an R x C grid of boxes.
Enumerates dots, the lines joining adjacent dots, and the boxes bounded by four lines.
Lines and boxes are keyed by string ids ("h-r-c", "v-r-c", "b-r-c") for O(1) lookup.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotsboxes.engine import HORIZONTAL, VERTICAL

if TYPE_CHECKING:
    from dotsboxes.engine.state import Line, Box


@dataclass(frozen=True)
class BoardSize:
    """Board dimensions in boxes. Fixed for the lifetime of a match."""
    rows: int
    cols: int

    @property
    def token(self) -> str:
        return f"{self.rows}x{self.cols}"

    def to_dict(self) -> dict[str, int]:
        return {"rows": self.rows, "cols": self.cols}

    @classmethod
    def from_dict(cls, data: dict) -> "BoardSize":
        return cls(rows=int(data["rows"]), cols=int(data["cols"]))


def parse_board_size(token: str) -> BoardSize:
    """
    Parse a board size token of the form "RxC" (e.g. "5x4" -> rows=5, cols=4).
    Raises ValueError for malformed tokens or non-positive dimensions.
    """
    if not isinstance(token, str):
        raise ValueError(f"Board size must be a string like '5x4', got {token!r}")
    parts = token.strip().lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Invalid board size '{token}'. Expected ROWSxCOLS (e.g. '5x4')")
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid board size '{token}'. Expected ROWSxCOLS (e.g. '5x4')") from None
    if rows < 1 or cols < 1:
        raise ValueError(f"Board size '{token}' must have at least 1 row and 1 column")
    return BoardSize(rows, cols)


# ===== Identifiers =====

def line_id(row: int, col: int, orientation: str) -> str:
    return f"{orientation}-{row}-{col}"


def box_id(row: int, col: int) -> str:
    return f"b-{row}-{col}"


def parse_line_id(lid: str) -> tuple[int, int, str]:
    """Split "h-2-3" into (2, 3, "h")."""
    try:
        orientation, row, col = lid.split("-")
        row_i, col_i = int(row), int(col)
    except (AttributeError, ValueError):
        raise ValueError(f"Malformed line id: {lid!r}") from None
    if orientation not in (HORIZONTAL, VERTICAL):
        raise ValueError(f"Malformed line id: {lid!r}")
    return row_i, col_i, orientation


def is_valid_line(board_size: BoardSize, row: int, col: int, orientation: str) -> bool:
    if orientation == HORIZONTAL:
        return 0 <= row <= board_size.rows and 0 <= col < board_size.cols
    if orientation == VERTICAL:
        return 0 <= row < board_size.rows and 0 <= col <= board_size.cols
    return False


# ===== Counts =====

def dot_count(board_size: BoardSize) -> int:
    return (board_size.rows + 1) * (board_size.cols + 1)


def line_count(board_size: BoardSize) -> int:
    rows, cols = board_size.rows, board_size.cols
    return (rows + 1) * cols + rows * (cols + 1)


def box_count(board_size: BoardSize) -> int:
    return board_size.rows * board_size.cols


# ===== Adjacency =====

def box_line_ids(row: int, col: int) -> tuple[str, str, str, str]:
    """The four lines bounding box (row, col): top, bottom, left, right."""
    return (
        line_id(row, col, HORIZONTAL),
        line_id(row + 1, col, HORIZONTAL),
        line_id(row, col, VERTICAL),
        line_id(row, col + 1, VERTICAL),
    )


def adjacent_box_ids(lid: str, board_size: BoardSize) -> list[str]:
    """
    Boxes bordering a line: at most two, fewer on the board edge.
    Horizontal lines border the box above and below; vertical lines the box left and right.
    """
    row, col, orientation = parse_line_id(lid)
    boxes = []
    if orientation == HORIZONTAL:
        if row > 0:
            boxes.append(box_id(row - 1, col))
        if row < board_size.rows:
            boxes.append(box_id(row, col))
    else:
        if col > 0:
            boxes.append(box_id(row, col - 1))
        if col < board_size.cols:
            boxes.append(box_id(row, col))
    return boxes


def initialize_board(board_size: BoardSize) -> tuple[dict[str, "Line"], dict[str, "Box"]]:
    """
    Create every line and box for a board, all undrawn / incomplete.

    Order is deterministic: horizontal lines row by row, then vertical lines,
    then boxes row by row.

    Returns:
        Tuple of (lines, boxes), each an insertion-ordered dict keyed by id
    """
    from dotsboxes.engine.state import Line, Box

    rows, cols = board_size.rows, board_size.cols
    if rows < 1 or cols < 1:
        raise ValueError(f"Board must have at least 1 row and 1 column, got {rows}x{cols}")

    lines: dict[str, Line] = {}
    for r in range(rows + 1):
        for c in range(cols):
            line = Line(row=r, col=c, orientation=HORIZONTAL)
            lines[line.id] = line
    for r in range(rows):
        for c in range(cols + 1):
            line = Line(row=r, col=c, orientation=VERTICAL)
            lines[line.id] = line

    boxes: dict[str, Box] = {}
    for r in range(rows):
        for c in range(cols):
            box = Box(row=r, col=c)
            boxes[box.id] = box

    return lines, boxes
