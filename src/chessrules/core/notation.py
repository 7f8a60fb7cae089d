"""Notation helpers: square/move input parsing and FEN piece placement."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_TYPES, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_PROMOTION_CHARS: dict[str, PieceType] = {
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}

# Squares on which a king or rook still counts as unmoved.
_HOME_SQUARES: dict[tuple[Color, PieceType], tuple[Square, ...]] = {
    (Color.WHITE, PieceType.KING): (Square(4, 7),),
    (Color.BLACK, PieceType.KING): (Square(4, 0),),
    (Color.WHITE, PieceType.ROOK): (Square(0, 7), Square(7, 7)),
    (Color.BLACK, PieceType.ROOK): (Square(0, 0), Square(7, 0)),
}


# ── User input ──────────────────────────────────────────────────────────────


def parse_square(text: str) -> Square:
    """Parse user input such as ``'e2'`` or ``' E2 '`` into a square."""
    return Square.from_notation(text.strip().upper())


def parse_promotion(text: str) -> PieceType:
    """Parse a promotion letter (Q/R/B/N, any case)."""
    try:
        return _PROMOTION_CHARS[text.strip().upper()]
    except KeyError:
        raise ValueError(f"Invalid promotion piece: {text!r}") from None


def promotion_char(piece_type: PieceType) -> str:
    if piece_type not in PROMOTION_TYPES:
        raise ValueError(f"Cannot promote to {piece_type.name}")
    return next(ch for ch, pt in _PROMOTION_CHARS.items() if pt == piece_type)


def parse_move_input(text: str) -> tuple[Square, Square, PieceType | None]:
    """Parse ``'E2 E4'`` (optionally ``'E7 E8 N'``) into its parts."""
    parts = text.split()
    if len(parts) not in (2, 3):
        raise ValueError(f"Expected two squares like 'E2 E4', got {text!r}")
    from_sq = parse_square(parts[0])
    to_sq = parse_square(parts[1])
    promotion = parse_promotion(parts[2]) if len(parts) == 3 else None
    return from_sq, to_sq, promotion


# ── Piece placement (first FEN field) ───────────────────────────────────────


def board_from_placement(placement: str, en_passant: Square | None = None) -> Board:
    """Build a board from a FEN piece-placement field.

    Kings and rooks away from their starting squares, and pawns away from
    their starting rank, are marked as moved; everything else is unmoved.
    """
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    pieces: list[Piece] = []
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                sq = Square(file, rank)
                piece = Piece.from_char(ch, sq)
                piece.has_moved = _starts_moved(piece)
                pieces.append(piece)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return Board.from_pieces(pieces, en_passant)


def _starts_moved(piece: Piece) -> bool:
    if piece.piece_type == PieceType.PAWN:
        return piece.square.rank != piece.color.pawn_rank
    homes = _HOME_SQUARES.get((piece.color, piece.piece_type))
    if homes is None:
        return False
    return piece.square not in homes


def board_to_placement(board: Board) -> str:
    """Serialise the piece placement of *board* as a FEN field."""
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
