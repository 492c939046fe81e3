"""
Virtual LCD and LEDs

Simulates a JHD1313M1 16x2 RGB backlight LCD and Grove LEDs.
Every call is recorded so the display sequence can be inspected.
"""

from ..common.logging_setup import get_service_logger
from ..hardware.base import Display, Led

logger = get_service_logger("simulator")

LCD_ROWS = 2
LCD_COLUMNS = 16


class VirtualLcd(Display):
    """
    Character buffer with cursor and backlight color.

    Text written past the last column is dropped, like on the
    visible area of the real module.
    """

    def __init__(self, rows: int = LCD_ROWS, columns: int = LCD_COLUMNS):
        self.rows = rows
        self.columns = columns
        self._buffer = [[" "] * columns for _ in range(rows)]
        self._row = 0
        self._column = 0
        self.color: tuple[int, int, int] = (255, 255, 255)
        # (operation, args) for every call
        self.history: list[tuple[str, tuple]] = []

    def clear(self) -> None:
        self._buffer = [[" "] * self.columns for _ in range(self.rows)]
        self._row = 0
        self._column = 0
        self.history.append(("clear", ()))

    def set_cursor(self, row: int, column: int) -> None:
        self._row = row
        self._column = column
        self.history.append(("set_cursor", (row, column)))

    def write(self, text: str) -> None:
        self.history.append(("write", (text,)))
        for char in text:
            if 0 <= self._row < self.rows and 0 <= self._column < self.columns:
                self._buffer[self._row][self._column] = char
            self._column += 1
        logger.debug(f"LCD: {self.lines()}")

    def set_color(self, red: int, green: int, blue: int) -> None:
        self.color = (red, green, blue)
        self.history.append(("set_color", (red, green, blue)))

    def line(self, row: int) -> str:
        """Visible text of a row, trailing blanks stripped."""
        return "".join(self._buffer[row]).rstrip()

    def lines(self) -> list[str]:
        return [self.line(row) for row in range(self.rows)]

    def writes(self) -> list[str]:
        """Every string written, in order."""
        return [args[0] for op, args in self.history if op == "write"]


class VirtualLed(Led):
    """LED that records its state changes"""

    def __init__(self, name: str):
        self.name = name
        self.is_on = False
        self.history: list[bool] = []

    def on(self) -> None:
        self.is_on = True
        self.history.append(True)

    def off(self) -> None:
        self.is_on = False
        self.history.append(False)

    @property
    def blink_count(self) -> int:
        """Completed on->off transitions"""
        return sum(
            1 for prev, cur in zip(self.history, self.history[1:]) if prev and not cur
        )
