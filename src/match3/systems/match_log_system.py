from typing import List

from esper import World

from match3.events.bus import EventBus, EVENT_BOARD_MATCH, EVENT_BOARD_REFILL
from match3.components.match_record import MatchRecord
from match3.components.refill_request import RefillRequest


class MatchLogSystem:
    """Records board notifications as entities for downstream consumers.

    Logic:
      - On EVENT_BOARD_MATCH: create an entity holding a MatchRecord.
      - On EVENT_BOARD_REFILL: create an entity holding a RefillRequest.
    The board itself is never touched; clearing and refilling belong to
    whichever system consumes these records.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._sequence = 0
        self.event_bus.subscribe(EVENT_BOARD_MATCH, self.on_board_match)
        self.event_bus.subscribe(EVENT_BOARD_REFILL, self.on_board_refill)

    def _next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def on_board_match(self, sender, **kwargs):
        match = kwargs.get('match')
        if match is None:
            return
        positions = [tuple(pos) for pos in match.positions]
        self.world.create_entity(MatchRecord(
            sequence=self._next_sequence(),
            matched=match.matched,
            positions=positions,
            cascade=len(positions) == 1,
        ))

    def on_board_refill(self, sender, **kwargs):
        self.world.create_entity(RefillRequest(sequence=self._next_sequence()))

    def records(self) -> List[MatchRecord]:
        return sorted((rec for _, rec in self.world.get_component(MatchRecord)), key=lambda rec: rec.sequence)

    def refill_requests(self) -> List[RefillRequest]:
        return sorted((req for _, req in self.world.get_component(RefillRequest)), key=lambda req: req.sequence)

    def clear(self) -> None:
        entities = [ent for ent, _ in self.world.get_component(MatchRecord)]
        entities += [ent for ent, _ in self.world.get_component(RefillRequest)]
        for ent in entities:
            self.world.delete_entity(ent, immediate=True)
