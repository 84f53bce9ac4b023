"""Board units and the world map they make up."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Sequence

if TYPE_CHECKING:
    from .player import Player

DEFAULT_MAP_FILE = "map.dat"


class MapUnit(ABC):
    """A square on the board that players can stand on and perhaps own."""

    kind = ""

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name
        self.host: Optional[Player] = None
        self.players_here: list[Player] = []

    @property
    def price(self) -> int:
        """Purchase price; zero means the unit cannot be bought."""
        return 0

    @abstractmethod
    def on_visit(self, player: Player) -> Optional[str]:
        """Apply the effect of a player landing here; return a message, if any."""

    def reset(self) -> None:
        """Return the unit to its unowned state."""

    def add_player_here(self, player: Player) -> None:
        self.players_here.append(player)

    def remove_player_here(self, player: Player) -> None:
        self.players_here = [p for p in self.players_here if p is not player]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"


class UpgradableUnit(MapUnit):
    """A property whose fine grows as its owner upgrades it."""

    kind = "U"
    MAX_LEVEL = 5

    def __init__(
        self, id: int, name: str, price: int, upgrade_price: int, fines: Sequence[int]
    ) -> None:
        super().__init__(id, name)
        if len(fines) != self.MAX_LEVEL:
            raise ValueError(f"expected {self.MAX_LEVEL} fines, got {len(fines)}")
        self._price = price
        self.upgrade_price = upgrade_price
        self.fines = tuple(fines)
        self.level = 1

    @property
    def price(self) -> int:
        return self._price

    @property
    def fine(self) -> int:
        """Fine charged to visitors at the current level."""
        return self.fines[self.level - 1]

    def upgrade(self) -> None:
        if self.level < self.MAX_LEVEL:
            self.level += 1

    def reset(self) -> None:
        self.level = 1
        self.host = None

    def on_visit(self, player: Player) -> Optional[str]:
        host = self.host
        if host is None or host is player:
            return None
        fine = self.fine
        player.pay(fine)
        host.receive(fine)
        return (
            f"{player.name} paid a fine of ${fine} to {host.name} "
            f"for visiting {self.name}"
        )


class RandomCostUnit(MapUnit):
    """A property whose fine is a die roll times a fixed amount."""

    kind = "R"

    def __init__(
        self,
        id: int,
        name: str,
        price: int,
        fine_per_point: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(id, name)
        self._price = price
        self.fine_per_point = fine_per_point
        self._rng = rng if rng is not None else random.Random()

    @property
    def price(self) -> int:
        return self._price

    def reset(self) -> None:
        self.host = None

    def on_visit(self, player: Player) -> Optional[str]:
        host = self.host
        if host is None or host is player:
            return None
        dice = self._rng.randint(1, 6)
        total = dice * self.fine_per_point
        player.pay(total)
        host.receive(total)
        return f"{player.name} rolled a {dice}, paying a fine of ${total} to {host.name}"


class CollectableUnit(MapUnit):
    """A property whose fine scales with how many such units the owner holds."""

    kind = "C"

    def __init__(self, id: int, name: str, price: int, unit_fine: int) -> None:
        super().__init__(id, name)
        self._price = price
        self.unit_fine = unit_fine

    @property
    def price(self) -> int:
        return self._price

    def reset(self) -> None:
        self.host = None

    def on_visit(self, player: Player) -> Optional[str]:
        host = self.host
        if host is None or host is player:
            return None
        owned = host.collectable_count
        fine = owned * self.unit_fine
        player.pay(fine)
        host.receive(fine)
        return (
            f"{host.name} owns {owned} collectable unit(s). "
            f"{player.name} paid a fine of ${fine}."
        )


class JailUnit(MapUnit):
    """A square that makes the visitor miss their next turn."""

    kind = "J"

    def __init__(self, id: int, name: str) -> None:
        super().__init__(id, name)

    def on_visit(self, player: Player) -> Optional[str]:
        player.set_to_jail()
        return (
            f"{player.name} is visiting the Jail. "
            "They will be frozen for one round."
        )


class WorldMap:
    """The ordered ring of units that makes up the board."""

    def __init__(self, units: Iterable[MapUnit] = ()) -> None:
        self._units = list(units)

    @classmethod
    def from_file(
        cls, path: str = DEFAULT_MAP_FILE, rng: Optional[random.Random] = None
    ) -> WorldMap:
        """Load a board from a map description file."""
        with open(path, encoding="utf-8") as handle:
            return cls(parse_map(handle, rng))

    def unit(self, index: int) -> Optional[MapUnit]:
        """The unit at an index, or None when the index is off the board."""
        if 0 <= index < len(self._units):
            return self._units[index]
        return None

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[MapUnit]:
        return iter(self._units)


_FIELD_COUNTS = {"U": 7, "C": 2, "R": 2, "J": 0}


def parse_map(
    lines: Iterable[str], rng: Optional[random.Random] = None
) -> list[MapUnit]:
    """Build units from map lines; lines of unknown kind are skipped.

    Each line starts with a kind letter and a name, followed by the
    kind's integer fields.
    """
    units: list[MapUnit] = []
    for line_no, line in enumerate(lines, 1):
        text = line.strip()
        if not text:
            continue
        kind = text[0]
        count = _FIELD_COUNTS.get(kind)
        if count is None:
            continue
        name, *fields = text[1:].split() or [""]
        if len(fields) < count:
            raise ValueError(
                f"line {line_no}: unit {name!r} of kind {kind} needs "
                f"{count} numbers, found {len(fields)}"
            )
        try:
            numbers = [int(field) for field in fields[:count]]
        except ValueError as exc:
            raise ValueError(f"line {line_no}: {exc}") from exc

        unit_id = len(units)
        if kind == "U":
            price, upgrade_price, *fines = numbers
            units.append(UpgradableUnit(unit_id, name, price, upgrade_price, fines))
        elif kind == "C":
            units.append(CollectableUnit(unit_id, name, *numbers))
        elif kind == "R":
            units.append(RandomCostUnit(unit_id, name, *numbers, rng=rng))
        else:
            units.append(JailUnit(unit_id, name))
    return units