from connect4.utils import Player

ONE = Player.ONE
TWO = Player.TWO

# Full-board layout with no run longer than two in any direction. Columns in
# group A start with Player ONE at the bottom, the rest with Player TWO; each
# column then alternates upward.
DRAW_GROUP_A = {0, 1, 4, 5}


def draw_moves():
    """(column, player) pairs that fill the board without a winner."""
    moves = []
    for column in range(7):
        offset = 0 if column in DRAW_GROUP_A else 1
        for height in range(6):
            moves.append((column, ONE if (height + offset) % 2 == 0 else TWO))
    return moves


def play(engine, *moves):
    """Play columns (ints) or explicit (column, player) pairs in order."""
    for move in moves:
        if isinstance(move, tuple):
            engine.play_column(*move)
        else:
            engine.play_column(move)
