"""Turn handling, board rendering and the interactive command for the game."""

from __future__ import annotations

import argparse
import random
import re
import subprocess
import sys
from typing import Callable, Optional, Sequence, TextIO

from .board import DEFAULT_MAP_FILE, MapUnit, UpgradableUnit, WorldMap
from .player import Player, PlayerStatus, Roster

MAX_PLAYERS = 4
GO_REWARD = 2000
DEFAULT_NAMES = ("A-Tu", "Little-Mei", "King-Baby", "Mrs.Money")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def roll_dice(rng: random.Random) -> int:
    """A die roll from 1 to 6."""
    return rng.randint(1, 6)


def unit_details(unit: MapUnit) -> str:
    """A short summary of a unit's owner, fine or price."""
    owner = unit.host
    if owner is None:
        return f"B$ {unit.price:<8}"
    if isinstance(unit, UpgradableUnit):
        return f"{{{owner.id}}} U$ {unit.fine:<5}L{unit.level}"
    return f"{{{owner.id}}} B$ {unit.price:<8}"


def _track(players: Roster, location: int) -> str:
    cells = [" "] * len(players)
    for player in players:
        if player.status is not PlayerStatus.BANKRUPT and player.location == location:
            cells[player.id] = str(player.id)[0]
    return "".join(cells)


def _owner_text(unit: MapUnit) -> str:
    return "" if unit.host is None else f"{{{unit.host.id}}}"


def _info_text(unit: MapUnit) -> str:
    if unit.host is None:
        return f"B$ {unit.price}"
    if isinstance(unit, UpgradableUnit):
        return f"U$ {unit.upgrade_price} L{unit.level}"
    return "Owned"


def _cell(unit: MapUnit, track: str, width: int, info_width: int) -> str:
    return (
        f"={track:<{width}}=  [{unit.id}] {unit.name:>10} "
        f"{_owner_text(unit):<4}{_info_text(unit):<{info_width}}"
    )


def render_board(world_map: WorldMap, players: Roster) -> str:
    """The board as two columns: the first half down the left, the rest up the right."""
    count = len(world_map)
    if count == 0:
        return ""
    width = len(players)
    lines = []
    for left_id in range((count + 1) // 2):
        right_id = count - 1 - left_id
        left_unit = world_map.unit(left_id)
        line = _cell(left_unit, _track(players, left_id), width, 14)
        if right_id != left_id:
            right_unit = world_map.unit(right_id)
            line += _cell(right_unit, _track(players, right_id), width, 12)
        lines.append(line + "\n")
    return "".join(lines)


def render_status(players: Roster, current_index: int) -> str:
    """Each player's money and holdings, with the current player marked."""
    parts = ["\n"]
    for index, player in enumerate(players):
        if player.status is PlayerStatus.BANKRUPT:
            parts.append(f"   [{player.id}] {player.name:<12}is BANKRUPT\n")
            continue
        marker = "=>" if index == current_index else "  "
        parts.append(
            f"{marker}[{player.id}] {player.name:<12}${player.money:<8}"
            f"with {player.unit_count} units\n"
        )
    parts.append("\n")
    return "".join(parts)


def _prompt(output: TextIO, text: str) -> None:
    output.write(text)
    output.flush()


def read_player_names(
    input_func: Callable[[], str] = input, output: Optional[TextIO] = None
) -> list[str]:
    """Ask how many players take part and what they are called.

    An answer that is not a number gives one player with the first default
    name; a number is clamped to between 1 and 4, and each blank name keeps
    its default.
    """
    out = output if output is not None else sys.stdout
    names = list(DEFAULT_NAMES)
    _prompt(out, f"How many players?(Maximum:{MAX_PLAYERS})...>")

    match = None
    try:
        line = input_func()
        while not line.strip():
            line = input_func()
        match = _LEADING_INT.match(line)
    except EOFError:
        pass

    if match is None:
        return names[:1]

    count = max(1, min(MAX_PLAYERS, int(match.group(1))))
    for index in range(count):
        _prompt(
            out,
            f"Please input player {index + 1}'s name (Default: {names[index]})...>",
        )
        try:
            name = input_func()
        except EOFError:
            name = ""
        if name:
            names[index] = name
    return names[:count]


class Game:
    """An interactive game played by a roster of players on a world map."""

    def __init__(
        self,
        world_map: WorldMap,
        players: Roster,
        input_func: Callable[[], str] = input,
        output: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        start = world_map.unit(0)
        if start is None:
            raise ValueError("the board has no units")
        self.world_map = world_map
        self.players = players
        self._input = input_func
        self.output = output if output is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self._clear = clear
        self.active_players = sum(
            1 for p in players if p.status is not PlayerStatus.BANKRUPT
        )
        for player in players:
            start.add_player_here(player)

    def _write(self, text: str) -> None:
        self.output.write(text)

    def _ask(self, text: str) -> Optional[str]:
        """Prompt and read a line; None at the end of input."""
        _prompt(self.output, text)
        try:
            return self._input()
        except EOFError:
            return None

    def _wait_for_enter(self) -> None:
        self._ask("\nPress Enter to continue...")

    def _display(self, current_index: int) -> None:
        self._write(render_board(self.world_map, self.players))
        self._write(render_status(self.players, current_index))

    def handle_buy(self, player: Player, unit: MapUnit) -> None:
        """Offer an unowned unit for sale, or an upgrade of the player's own."""
        if unit.host is None and unit.price > 0:
            price = unit.price
            if player.money >= price:
                answer = self._ask(
                    f"{player.name}, do you want to buy {unit.name}? "
                    "(1: Yes [default] / 2: No) ...>"
                )
                if answer != "2":
                    player.pay(price)
                    player.add_unit(unit)
                    self._write(f"You pay ${price} to buy {unit.name}\n")
        elif unit.host is player and isinstance(unit, UpgradableUnit):
            self.handle_upgrade(player, unit)

    def handle_upgrade(self, player: Player, unit: UpgradableUnit) -> None:
        """Offer to raise an owned unit by one level."""
        if unit.level >= UpgradableUnit.MAX_LEVEL:
            return
        cost = unit.upgrade_price
        if player.money < cost:
            return
        self._write(
            f"You own {unit.name} (Lv.{unit.level}). Upgrade to Lv.{unit.level + 1} "
            f"costs ${cost}\n"
        )
        answer = self._ask("Do you want to upgrade? (1:Yes [default] / 2:No)...>")
        if answer != "2":
            player.pay(cost)
            unit.upgrade()
            self._write(f"{player.name} upgraded {unit.name} to Lv.{unit.level}\n")

    def take_turn(self, index: int) -> bool:
        """Play one turn for a player; False when they choose to end the game."""
        player = self.players[index]
        choice = self._ask(
            f"{player.name}, your action? (1:Dice [default] / 2:Exit)...>"
        )
        if choice is None or choice == "2":
            return False

        if player.status is PlayerStatus.IN_JAIL:
            self._write(f"{player.name} is in jail and misses a turn.\n")
            player.release_from_jail()
            self._wait_for_enter()
            return True

        dice = roll_dice(self.rng)
        old_location = player.location
        new_location = (old_location + dice) % len(self.world_map)
        if new_location < old_location:
            self._write(f"{player.name} passed GO and collects ${GO_REWARD}!\n")
            player.receive(GO_REWARD)
        player.move_to(new_location, self.world_map)
        unit = self.world_map.unit(new_location)

        self._clear()
        self._display(index)
        self._write(f"{player.name} moved to {unit.name}\n")

        message = unit.on_visit(player)
        if message:
            self._write(message + "\n")
        self.handle_buy(player, unit)

        if player.money < 0:
            self._write(f"{player.name} is bankrupt!\n")
            player.declare_bankruptcy()
            self.active_players -= 1

        self._wait_for_enter()
        return True

    def run(self) -> None:
        """Play turns in order until one player is left or someone exits."""
        count = len(self.players)
        self._clear()
        self._display(0)
        index = 0
        while self.active_players > 1:
            player = self.players[index]
            if player.status is PlayerStatus.BANKRUPT:
                index = (index + 1) % count
                continue
            was_jailed = player.status is PlayerStatus.IN_JAIL
            if not self.take_turn(index):
                break
            index = (index + 1) % count
            if not was_jailed:
                self._clear()
            self._display(index)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive game on the board described in map.dat."""
    parser = argparse.ArgumentParser(
        prog="richman", description="A board game of buying and upgrading property."
    )
    parser.parse_args(argv)

    rng = random.Random()
    try:
        world_map = WorldMap.from_file(DEFAULT_MAP_FILE, rng)
    except OSError:
        print(f"Failed to open {DEFAULT_MAP_FILE}", file=sys.stderr)
        return 1

    clear_screen()
    names = read_player_names(input, sys.stdout)
    game = Game(world_map, Roster(names), input, sys.stdout, rng, clear_screen)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())