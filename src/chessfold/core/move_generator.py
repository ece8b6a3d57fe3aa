"""Pseudo-legal move generation per piece + attack aggregation.

Every generator is a pure function of ``(state, square, color)`` returning
:class:`PseudoMove` candidates. King safety is not considered here; see
:class:`chessfold.core.rules.Rules` for the legality filter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from chessfold.core.enums import Color, PieceType
from chessfold.core.move import Move, PseudoMove, Replace
from chessfold.core.piece import Piece
from chessfold.core.queries import has_moved
from chessfold.core.state import GameState
from chessfold.core.types import Coord, Square, parse_square, square_name, translate

KNIGHT_OFFSETS: tuple[Coord, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Coord, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Coord, ...] = BISHOP_DIRS + ROOK_DIRS

# Underpromotion is not offered.
PROMOTION_PIECE: Final = PieceType.QUEEN

_NO_ATTACKS: frozenset[Square] = frozenset()


# -- Shared geometry ----------------------------------------------------------


def _step_moves(
    state: GameState, sq: Square, color: Color, offsets: tuple[Coord, ...]
) -> list[PseudoMove]:
    board = state.board
    moves: list[PseudoMove] = []
    for offset in offsets:
        to_sq = translate(sq, offset)
        if to_sq is None:
            continue
        target = board[to_sq]
        if target is None or target.color != color:
            moves.append(PseudoMove(to_sq))
    return moves


def _ray_moves(
    state: GameState, sq: Square, color: Color, directions: tuple[Coord, ...]
) -> list[PseudoMove]:
    board = state.board
    moves: list[PseudoMove] = []
    for dc, dr in directions:
        for distance in range(1, 8):
            to_sq = translate(sq, (dc * distance, dr * distance))
            if to_sq is None:
                break
            target = board[to_sq]
            if target is None:
                moves.append(PseudoMove(to_sq))
                continue
            if target.color != color:
                moves.append(PseudoMove(to_sq))
            break
    return moves


# -- Piece generators ---------------------------------------------------------


def knight_moves(state: GameState, sq: Square, color: Color) -> list[PseudoMove]:
    return _step_moves(state, sq, color, KNIGHT_OFFSETS)


def bishop_moves(state: GameState, sq: Square, color: Color) -> list[PseudoMove]:
    return _ray_moves(state, sq, color, BISHOP_DIRS)


def rook_moves(state: GameState, sq: Square, color: Color) -> list[PseudoMove]:
    return _ray_moves(state, sq, color, ROOK_DIRS)


def queen_moves(state: GameState, sq: Square, color: Color) -> list[PseudoMove]:
    return _ray_moves(state, sq, color, QUEEN_DIRS)


def pawn_moves(
    state: GameState, sq: Square, color: Color, attack_only: bool = False
) -> list[PseudoMove]:
    """Pushes, double step, diagonal captures, en passant and promotion.

    With *attack_only* set, empty diagonals are reported too, since they are
    covered by the pawn even when nothing stands there to capture.
    """
    board = state.board
    forward = color.forward
    last_row = color.opposite.home_row
    moves: list[PseudoMove] = []

    def promotion(to_sq: Square) -> Replace | None:
        if parse_square(to_sq)[1] != last_row:
            return None
        return Replace(
            to_sq, Piece(color, PieceType.PAWN), Piece(color, PROMOTION_PIECE)
        )

    one_step = translate(sq, (0, forward))
    if one_step is not None and board.is_empty(one_step):
        moves.append(PseudoMove(one_step, promotion(one_step), attacks=False))
        if not has_moved(state, sq):
            two_step = translate(sq, (0, 2 * forward))
            if two_step is not None and board.is_empty(two_step):
                moves.append(PseudoMove(two_step, attacks=False))

    for side in (-1, 1):
        diagonal = translate(sq, (side, forward))
        if diagonal is None:
            continue
        target = board[diagonal]
        if target is not None:
            if target.color != color:
                moves.append(PseudoMove(diagonal, promotion(diagonal)))
            continue
        if attack_only:
            moves.append(PseudoMove(diagonal, promotion(diagonal)))
        en_passant = _en_passant(state, sq, side, diagonal, color)
        if en_passant is not None:
            moves.append(en_passant)
    return moves


def _en_passant(
    state: GameState, sq: Square, side: int, diagonal: Square, color: Color
) -> PseudoMove | None:
    """En passant onto *diagonal* if the enemy pawn beside *sq* just double-stepped."""
    side_sq = translate(sq, (side, 0))
    last = state.last_move
    if side_sq is None or last is None:
        return None
    victim = state.board[side_sq]
    if victim is None or victim.piece_type != PieceType.PAWN or victim.color == color:
        return None
    origin = translate(side_sq, (0, 2 * color.forward))
    if origin is None or last.move != Move(origin, side_sq):
        return None
    return PseudoMove(diagonal, Replace(side_sq, victim), attacks=False)


def king_moves(
    state: GameState,
    sq: Square,
    color: Color,
    attacked: frozenset[Square] = _NO_ATTACKS,
) -> list[PseudoMove]:
    """One-step moves plus castling toward either rook.

    *attacked* holds the squares the opponent attacks. Castling requires the
    king and both rooks unmoved, the king not attacked, and every square
    strictly between king and rook empty and unattacked. The king lands two
    squares toward the rook; the rook lands on the square the king crossed.
    """
    moves = _step_moves(state, sq, color, KING_OFFSETS)
    if sq in attacked or has_moved(state, sq):
        return moves

    board = state.board
    column, row = parse_square(sq)
    for rook_column in (0, 7):
        direction = 1 if rook_column > column else -1
        rook_sq = square_name((rook_column, row))
        if has_moved(state, rook_sq):
            continue
        between = [
            square_name((c, row))
            for c in range(column + direction, rook_column, direction)
        ]
        if any(s in attacked or not board.is_empty(s) for s in between):
            continue
        moves.append(
            PseudoMove(
                square_name((column + 2 * direction, row)),
                Move(rook_sq, square_name((column + direction, row))),
                attacks=False,
            )
        )
    return moves


_Generator = Callable[[GameState, Square, Color], list[PseudoMove]]

_SIMPLE_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
}


def piece_moves(
    state: GameState,
    sq: Square,
    color: Color,
    attacked: frozenset[Square] = _NO_ATTACKS,
    attack_only: bool = False,
) -> list[PseudoMove]:
    """Pseudo-legal candidates for the piece on *sq*, if it belongs to *color*."""
    piece = state.board[sq]
    if piece is None or piece.color != color:
        return []
    if piece.piece_type == PieceType.PAWN:
        return pawn_moves(state, sq, color, attack_only)
    if piece.piece_type == PieceType.KING:
        return king_moves(state, sq, color, attacked)
    return _SIMPLE_GENERATORS[piece.piece_type](state, sq, color)


# -- Attack aggregation -------------------------------------------------------


def attacked_squares(state: GameState, by_color: Color) -> frozenset[Square]:
    """Every square covered by a pseudo-legal attack of *by_color*.

    Kings are generated with an empty attacked set so this never recurses
    into castling; castling never counts as an attack anyway.
    """
    attacked: set[Square] = set()
    for sq in state.board.pieces(by_color):
        for candidate in piece_moves(state, sq, by_color, attack_only=True):
            if candidate.attacks:
                attacked.add(candidate.to_sq)
    return frozenset(attacked)
