"""
Display configuration for TicTacToe.
All the settings for the game window, grid geometry and colours.
"""


class DisplayConfig:
    """
    Configuration class for the game window.
    Change these values to resize or recolour the board.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_WIDTH = 300
    WINDOW_HEIGHT = 300

    # Gap between an O and the edges of its cell
    PADDING = 10

    # ==================== COLOURS (BGR) ====================
    BACKGROUND_COLOR = (255, 255, 255)  # White
    LINE_COLOR = (0, 0, 0)              # Black

    # ==================== LOOP SETTINGS ====================
    # How long cv2.waitKey pumps window events each frame
    FRAME_DELAY_MS = 16

    # Keys that end the game early: 'q' and Esc
    QUIT_KEYS = (ord('q'), 27)

    # Keep the final board on screen this long (0 = close at once)
    RESULT_HOLD_MS = 1500

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    # Cell sizes follow the window size, so subclasses can resize the window
    @property
    def cell_width(self) -> int:
        return self.WINDOW_WIDTH // self.BOARD_SIZE

    @property
    def cell_height(self) -> int:
        return self.WINDOW_HEIGHT // self.BOARD_SIZE
