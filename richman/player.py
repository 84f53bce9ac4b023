"""Players and the roster of everyone taking part in a game."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from .board import MapUnit, WorldMap

STARTING_MONEY = 30000


class PlayerStatus(Enum):
    """Whether a player is playing normally, sitting out, or out of the game."""

    NORMAL = "normal"
    IN_JAIL = "in_jail"
    BANKRUPT = "bankrupt"


class Player:
    """A participant with money, a board position and owned units."""

    def __init__(self, id: int = 0, name: str = "nameless") -> None:
        self.id = id
        self.name = name
        self.location = 0
        self.money = STARTING_MONEY
        self.status = PlayerStatus.NORMAL
        self.owned_units: list[MapUnit] = []

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id!r}, name={self.name!r}, money={self.money}, "
            f"location={self.location}, status={self.status.name})"
        )

    @property
    def unit_count(self) -> int:
        """Number of units this player owns."""
        return len(self.owned_units)

    @property
    def collectable_count(self) -> int:
        """Number of owned units of the collectable kind."""
        return sum(1 for unit in self.owned_units if unit.kind == "C")

    def pay(self, amount: int) -> None:
        """Take money away; the balance may go negative."""
        self.money -= amount

    def receive(self, amount: int) -> None:
        """Add money to the balance."""
        self.money += amount

    def move_to(self, new_location: int, world_map: WorldMap) -> None:
        """Move to a new board index, keeping each unit's occupant list current."""
        old_unit = world_map.unit(self.location)
        if old_unit is not None:
            old_unit.remove_player_here(self)
        self.location = new_location
        new_unit = world_map.unit(new_location)
        if new_unit is not None:
            new_unit.add_player_here(self)

    def add_unit(self, unit: MapUnit) -> None:
        """Take ownership of a unit."""
        self.owned_units.append(unit)
        unit.host = self

    def release_all_units(self) -> None:
        """Reset every owned unit and give up ownership of all of them."""
        for unit in self.owned_units:
            unit.reset()
        self.owned_units.clear()

    def set_to_jail(self) -> None:
        self.status = PlayerStatus.IN_JAIL

    def release_from_jail(self) -> None:
        self.status = PlayerStatus.NORMAL

    def declare_bankruptcy(self) -> None:
        """Leave the game and release every owned unit."""
        self.status = PlayerStatus.BANKRUPT
        self.release_all_units()


class Roster:
    """The players of a game, numbered from zero in the order given."""

    def __init__(self, names: Iterable[str]) -> None:
        self._players = [Player(index, name) for index, name in enumerate(names)]

    def __getitem__(self, index: int) -> Player:
        if not 0 <= index < len(self._players):
            raise IndexError(f"no player at index {index}")
        return self._players[index]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)