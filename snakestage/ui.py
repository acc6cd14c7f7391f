"""Terminal front end: menu, board drawing, score boards and the game loop."""

from __future__ import annotations

import argparse
import curses
import locale
import time
from enum import Enum

from .models import (
    DOUBLE_GROWTH,
    GAME_OVER_TIMEOUT_MS,
    GROWTH,
    INITIAL_LENGTH,
    POISON,
    STAGE_COUNT,
    TICK_MS,
    CellType,
    Direction,
)
from .rules import direction_diff, mission_clear, mission_for
from .snake import Snake

BLOCK = "\u2B1B"

PAIR_SNAKE_HEAD = 1
PAIR_SNAKE_BODY = 2
PAIR_ITEM_GROWTH = 3
PAIR_ITEM_POISON = 4
PAIR_WALL = 5
PAIR_IMMUNE_WALL = 6
PAIR_GATE = 7
PAIR_ITEM_GROWTH_2 = 10

MENU_PLAY = 1
MENU_EXIT = 2

_KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_LEFT: Direction.LEFT,
}

_BANNER_BODY = (
    "$$$$$$                $$$  $$$      $$$         $$  $$          $$$  $$$         $$$$            ",
    "$$$$$$$$$$$$$$$$$     $$$    $$$    $$$        $$$$$$$$         $$$$$$           $$$$$$$$$$$            ",
    "           $$$$$$     $$$      $$$  $$$       $$      $$        $$$  $$$         $$$$              ",
)
_RULE = "_" * 97


class GameResult(Enum):
    """How a game session ended."""

    QUIT = "quit"
    OVER = "over"
    CLEARED = "cleared"


def _put(screen, row: int, col: int, text: str, attr: int = curses.A_NORMAL) -> None:
    """Write text, silently clipping what falls outside the window."""
    try:
        screen.addstr(row, col, text.rstrip("\n"), attr)
    except curses.error:
        pass


def _pair(number: int) -> int:
    try:
        return curses.color_pair(number)
    except curses.error:
        return curses.A_NORMAL


def _draw_banner(screen, face: str) -> None:
    _put(screen, 5, 8, f"$$$$$$$$$$$$${face}     $$$$$$        {face}          $$            $$$   {face}       $$$$$$${face}                ")
    for offset, line in enumerate(_BANNER_BODY):
        _put(screen, 6 + offset, 8, line)
    _put(screen, 9, 8, f"$$$$$$$$$$$$$$$$$     $$$        $$$$$$      $$       {face}      $$$    $$$       $$$$$$$$$$$           ")
    _put(screen, 11, 8, " " * 96)
    _put(screen, 12, 2, _RULE)


def _draw_frame(screen, top: int, bottom: int) -> None:
    for row in range(top, bottom + 1):
        _put(screen, row, 35, "|")
        _put(screen, row, 60, "|")
    for col in range(35, 61):
        _put(screen, top, col, "-")
        _put(screen, bottom, col, "-")


_ITEM_PAIRS = {
    GROWTH: PAIR_ITEM_GROWTH,
    POISON: PAIR_ITEM_POISON,
    DOUBLE_GROWTH: PAIR_ITEM_GROWTH_2,
}
_WALL_PAIRS = {
    CellType.IMMUNE_WALL: PAIR_IMMUNE_WALL,
    CellType.WALL: PAIR_WALL,
}


def draw_board(screen, snake: Snake) -> None:
    """Draw the snake, items, walls and gates on a cleared screen."""
    screen.erase()
    for index, point in enumerate(snake.body):
        pair = PAIR_SNAKE_HEAD if index == 0 else PAIR_SNAKE_BODY
        _put(screen, point.row, point.col, BLOCK, _pair(pair))
    for item in snake.items:
        pair = _ITEM_PAIRS.get(item.points)
        if pair is not None:
            _put(screen, item.point.row, item.point.col, BLOCK, _pair(pair))
    for wall in snake.walls:
        pair = _WALL_PAIRS.get(wall.kind)
        if pair is not None:
            _put(screen, wall.point.row, wall.point.col, BLOCK, _pair(pair))
    for gate in snake.gates:
        _put(screen, gate.row, gate.col, BLOCK, _pair(PAIR_GATE))
    screen.refresh()


def draw_score(screen, snake: Snake) -> None:
    """Draw the score board: length, growth and poison items eaten, gates passed."""
    _draw_frame(screen, 1, 7)
    _put(screen, 2, 36, "*******SCORE BOARD******")
    _put(screen, 3, 37, f"B: {snake.score}")
    _put(screen, 4, 37, f"+: {snake.growth}")
    _put(screen, 5, 37, f"-: {snake.poison}")
    _put(screen, 6, 37, f"G: {snake.gate_count}")
    screen.refresh()


def draw_mission(screen, snake: Snake) -> None:
    """Draw the stage's targets, marking each one reached with (V)."""
    _draw_frame(screen, 10, 16)
    _put(screen, 11, 36, "******MISSION BOARD*****")
    mission = mission_for(snake.stage)
    rows = (
        ("B", mission.length, snake.score),
        ("+", mission.growth, snake.growth),
        ("-", mission.poison, snake.poison),
        ("G", mission.gates, snake.gate_count),
    )
    for row, (label, target, value) in enumerate(rows, start=12):
        progress = "V" if target <= value else str(value)
        _put(screen, row, 37, f"{label}: {target} ({progress})")
    screen.refresh()


def _draw_menu(screen, choice: int) -> None:
    screen.erase()
    _draw_banner(screen, "(^^)")
    play_attr = curses.A_STANDOUT if choice == MENU_PLAY else curses.A_NORMAL
    exit_attr = curses.A_STANDOUT if choice == MENU_EXIT else curses.A_NORMAL
    _put(screen, 15, 32, " Play Snake Game", play_attr)
    _put(screen, 16, 34, " Exit Game", exit_attr)


def show_menu(screen) -> int:
    """Show the main menu and return the choice confirmed with Enter."""
    screen.keypad(True)
    choice = MENU_PLAY
    _draw_menu(screen, choice)
    while True:
        key = screen.getch()
        if key == ord("\n"):
            return choice
        if key == curses.KEY_UP:
            choice = choice - 1 if choice > 1 else 3
        elif key == curses.KEY_DOWN:
            choice = choice + 1 if choice < 2 else 1
        if choice in (MENU_PLAY, MENU_EXIT):
            _draw_menu(screen, choice)


def show_game_over(screen) -> None:
    """Show the game-over banner until q or Enter is pressed."""
    screen.erase()
    _draw_banner(screen, "(TT)")
    _put(screen, 14, 8, " " * 44 + "GAME OVER ")
    while screen.getch() not in (ord("q"), 13, 10):
        pass


def show_game_clear(screen) -> None:
    """Show the winner's message and wait for a key or the timeout."""
    screen.erase()
    screen.timeout(GAME_OVER_TIMEOUT_MS)
    _put(screen, 10, 10, "★★You are Winner★★★")
    screen.getch()


def show_next_stage(screen, stage: int) -> None:
    """Announce the stage after ``stage`` and wait for the N key."""
    screen.erase()
    _put(screen, 10, 10, f"NEXT STAGE({stage + 1}) >> ")
    _put(screen, 11, 10, "Press N key... ")
    screen.refresh()
    while True:
        time.sleep(1)
        if screen.getch() == ord("n"):
            return


def classic_game(screen) -> GameResult:
    """Play the stages in order until the player quits, loses or clears them all."""
    stage = 1
    snake = Snake(stage)
    screen.keypad(True)
    screen.timeout(TICK_MS)

    while True:
        key = screen.getch()
        if key == ord("q"):
            return GameResult.QUIT
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            if snake.direction == direction.opposite:
                show_game_over(screen)
                return GameResult.OVER
            if direction_diff(snake.direction, direction) != 2 and direction != snake.direction:
                snake.turn(direction)

        snake.move()
        draw_board(screen, snake)
        draw_score(screen, snake)
        draw_mission(screen, snake)

        if snake.collided or snake.score < INITIAL_LENGTH:
            show_game_over(screen)
            return GameResult.OVER

        if mission_clear(stage, snake.score, snake.growth, snake.poison, snake.gate_count):
            if stage == STAGE_COUNT:
                return GameResult.CLEARED
            show_next_stage(screen, stage)
            stage += 1
            snake = Snake(stage)
            continue

        _put(screen, 23, 15, "PRESS 'Q' to EXIT BACK TO MENU.", curses.A_STANDOUT)
        screen.refresh()


def _setup_terminal() -> None:
    try:
        curses.raw()
        curses.noecho()
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.use_default_colors()
        for pair, colour in (
            (PAIR_SNAKE_HEAD, curses.COLOR_RED),
            (PAIR_SNAKE_BODY, curses.COLOR_YELLOW),
            (PAIR_ITEM_GROWTH, curses.COLOR_GREEN),
            (PAIR_ITEM_POISON, curses.COLOR_MAGENTA),
            (PAIR_ITEM_GROWTH_2, curses.COLOR_WHITE),
            (PAIR_IMMUNE_WALL, curses.COLOR_BLACK),
            (PAIR_WALL, curses.COLOR_BLACK),
            (PAIR_GATE, curses.COLOR_BLUE),
        ):
            curses.init_pair(pair, colour, colour)
    except curses.error:
        pass


def _run(screen) -> int:
    _setup_terminal()
    while True:
        choice = show_menu(screen)
        if choice == MENU_PLAY:
            screen.timeout(-1)
            classic_game(screen)
            screen.timeout(-1)
        elif choice == MENU_EXIT:
            return 0


def main(argv=None) -> int:
    """Start the game in the terminal; return the exit status."""
    parser = argparse.ArgumentParser(prog="snakestage", description="Snake with stages, items and gates.")
    parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(_run)