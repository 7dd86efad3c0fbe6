from konigsberg.game.state import (
    GameState,
    GameStatus,
    MoveResult,
    make_move,
    new_game,
    replay,
    select_start_node,
    undo_move,
)
