"""Console-driven UI loops for Relic Bar."""
from __future__ import annotations

import secrets
from collections import Counter
from typing import Callable, Dict, List, Tuple

from relicbar.data import DataError, TileAtlas
from relicbar.domain.world_generation import WorldGenerationSettings, WorldGenerator
from relicbar.services.controllers import RogueliteGame

from .config import debug_enabled, load_config, save_config
from .render import render_action_bar, render_heading, render_menu, render_messages


_MAX_RANDOM_SEED = 2**31 - 1
_PREVIEW_WIDTH = 48
_PREVIEW_HEIGHT = 16
_BIOME_GLYPHS = {
    "deep_ocean": "~",
    "ocean": "-",
    "coast": ",",
    "plains": ".",
    "desert": ":",
    "jungle": "#",
    "snow": "^",
}


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    print("=== Relic Bar ===")
    running = True
    while running:
        entries = _main_menu_options()
        render_menu("Main Menu", [label for label, _ in entries])
        index = _prompt_choice(len(entries))
        action = entries[index][1]
        if action == "quit":
            running = False
        elif action == "new_run":
            _run_game_loop(RogueliteGame(_prompt_seed()), config)
        elif action == "world_preview":
            _run_world_preview(_prompt_seed())
        elif action == "options":
            _run_options_menu(config)
    print("Goodbye!")


def _main_menu_options() -> List[Tuple[str, str]]:
    return [
        ("New Run", "new_run"),
        ("World Preview", "world_preview"),
        ("Options", "options"),
        ("Quit", "quit"),
    ]


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


def _prompt_lock_position() -> float | None:
    """Ask for a lock position in percent. Blank means let the bar stop on its own."""
    while True:
        raw = input("Lock position 0-100 (blank for random): ").strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= value <= 100:
            return value / 100
        print("Please enter a value between 0 and 100.")


def _run_game_loop(game: RogueliteGame, config: Dict[str, str]) -> None:
    """Play one run until the party falls."""
    game.start_new_run()
    render_messages(game.messages)
    while game.phase != "game_over":
        render_heading("Status")
        print(game.get_status())
        if game.phase == "selecting_encounter":
            _play_selection(game)
        elif game.phase == "combat":
            _play_combat_turn(game, config)
        else:
            break
    print("\nThe expedition is over.\n")


def _play_selection(game: RogueliteGame) -> None:
    render_heading("Paths")
    for line in game.describe_options():
        print(line)
    mark = game.state.messages.appended_count
    result = game.try_choose_option(_prompt_choice(len(game.options)))
    print(result.message)
    render_messages(game.state.messages.entries_since(mark))


def _play_combat_turn(game: RogueliteGame, config: Dict[str, str]) -> None:
    bar = game.current_action_bar
    if bar is not None:
        render_action_bar(bar, show_segments=debug_enabled())
    encounter = game.current_encounter
    if encounter is not None and debug_enabled():
        print(f"(DEBUG enemy attack {encounter.enemy.base_attack})")
    if config.get("lock_mode") == "manual":
        position = _prompt_lock_position()
    else:
        input("Press Enter to stop the bar...")
        position = None
    mark = game.state.messages.appended_count
    result = game.try_resolve_turn(position)
    if result.ok:
        render_messages(game.state.messages.entries_since(mark))
    else:
        render_messages(result.log)


def _run_options_menu(config: Dict[str, str]) -> None:
    current = config.get("lock_mode", "random")
    render_menu(
        f"Options (lock mode: {current})",
        ["Random lock (press Enter to stop the bar)", "Manual lock (type a position)", "Back"],
    )
    choice = _prompt_choice(3)
    if choice == 2:
        return
    config["lock_mode"] = "random" if choice == 0 else "manual"
    save_config(config)
    print(f"Lock mode set to {config['lock_mode']}.")


def _run_world_preview(seed: int) -> None:
    settings = WorldGenerationSettings(width=_PREVIEW_WIDTH, height=_PREVIEW_HEIGHT, seed=seed)
    world = WorldGenerator().generate(settings)
    render_heading(f"World Preview (seed {world.settings.seed})")
    for line in _format_world_rows(world.map.width, world.map.height, lambda x, y: world.map[x, y].biome):
        print(line)

    try:
        atlas = TileAtlas.load()
    except DataError as exc:
        print(f"Tile atlas unavailable: {exc}")
        return
    counts = Counter(tile.biome for tile in world.map)
    render_heading("Biomes")
    for biome, count in counts.most_common():
        print(f"{_BIOME_GLYPHS[biome]} {biome:<10} {count:>4} tiles  {atlas.get_sprite(biome)}")


def _format_world_rows(width: int, height: int, biome_at: Callable[[int, int], str]) -> List[str]:
    return ["".join(_BIOME_GLYPHS[biome_at(x, y)] for x in range(width)) for y in range(height)]
