from esper import World

from match3.core.board import Board
from match3.events.bus import EventBus
from match3.components.board import BoardInfo
from match3.systems.match_log_system import MatchLogSystem


def create_world(event_bus: EventBus, board: Board) -> World:
    """Build a World tracking ``board``.

    The board must publish to ``event_bus`` for the match log to see its
    notifications; a board created without a bus is attached to it here.
    """
    world = World()
    if board.event_bus is None:
        board.event_bus = event_bus
    world.create_entity(BoardInfo(rows=board.height, cols=board.width))
    setattr(world, "match_log", MatchLogSystem(world, event_bus))
    return world
