"""
Main game loop for TicTacToe.

This script ties together:
- Logic (board, game state, win detection)
- Display (window, rendering, mouse input)

Run this script to play a two-player game with the mouse!
Press 'q' or Esc, or close the window, to quit.
"""

import sys
from typing import Optional

# Logic imports
from logic.game_state import GameState

# Display imports
from display.config import DisplayConfig
from display.events import PointerDownEvent, QuitEvent
from display.board_renderer import BoardRenderer
from display.input_mapper import InputMapper


class TicTacToeGame:
    """
    Main controller for one game.

    Game flow:
    1. Poll the event source for clicks and quit requests
    2. Turn each click into a move on the game state
    3. Draw the board
    4. Repeat until someone wins, the board is full, or the user quits

    The event source needs poll_events(); the surface needs the drawing
    calls used by BoardRenderer plus wait(). The game never creates a
    window itself, so fakes can be passed in.
    """

    def __init__(self, event_source, surface, config: Optional[DisplayConfig] = None):
        """
        Initialize the game.

        Args:
            event_source: Where clicks and quit requests come from.
            surface: Where the board is drawn.
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()
        self.events = event_source
        self.surface = surface

        self.game_state = GameState(verbose=self.config.DEBUG_MODE)
        self.renderer = BoardRenderer(self.config)
        self.input_mapper = InputMapper(self.config)

        self.is_running = False

    def run(self) -> GameState:
        """
        Play until the game ends or the user quits.

        Returns:
            The final game state.
        """
        self.is_running = True

        while self.is_running and not self.game_state.is_game_over:
            for event in self.events.poll_events():
                if isinstance(event, QuitEvent):
                    print("\nGame quit by user.")
                    self.is_running = False
                    break
                if isinstance(event, PointerDownEvent):
                    self.input_mapper.handle_click(self.game_state, event.x, event.y)

            self.renderer.render(self.surface, self.game_state.board)

        self.is_running = False

        if self.game_state.is_game_over:
            self._show_game_result()
            self.surface.wait(self.config.RESULT_HOLD_MS)

        return self.game_state

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 30)
        print("   GAME OVER!")
        print("=" * 30)

        self.game_state.print_board()


def main() -> int:
    """Main entry point. Returns the process exit code."""
    from display.window import Window

    config = DisplayConfig()
    window = Window(config)

    if not window.open():
        return 1

    try:
        TicTacToeGame(window, window, config).run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        window.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
