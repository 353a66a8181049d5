"""
Keyboard adjacency model for typing-slip typos.

Each layout is described by its character rows; the left and right
neighbours of a key are the characters beside it on the same row.
"""

from typing import Optional, Union

from .enums import KeyboardLayout


LAYOUT_ROWS: dict[KeyboardLayout, tuple[str, ...]] = {
    KeyboardLayout.QWERTY: (
        "1234567890-",
        "qwertyuiop",
        "asdfghjkl",
        "zxcvbnm",
    ),
    KeyboardLayout.QWERTZ: (
        "1234567890",
        "qwertzuiop",
        "asdfghjkl",
        "yxcvbnm",
    ),
    KeyboardLayout.AZERTY: (
        "1234567890",
        "azertyuiop",
        "qsdfghjklm",
        "wxcvbn",
    ),
    KeyboardLayout.DVORAK: (
        "1234567890",
        "pyfgcrl",
        "aoeuidhtns-",
        "qjkxbmwvz",
    ),
}


class KeyboardModel:
    """Left/right neighbour lookups for one keyboard layout."""

    def __init__(self, layout: Union[str, KeyboardLayout] = KeyboardLayout.QWERTY) -> None:
        """
        Args:
            layout: Layout name ('qwerty', 'qwertz', 'azerty', 'dvorak')

        Raises:
            ValueError: If the layout is not supported
        """
        if not isinstance(layout, KeyboardLayout):
            try:
                layout = KeyboardLayout(str(layout).strip().lower())
            except ValueError:
                supported = ", ".join(item.value for item in KeyboardLayout)
                raise ValueError(f"Unknown keyboard layout '{layout}' (supported: {supported})")

        self._layout = layout
        self._left: dict[str, str] = {}
        self._right: dict[str, str] = {}
        for row in LAYOUT_ROWS[layout]:
            for left, right in zip(row, row[1:]):
                self._right[left] = right
                self._left[right] = left

    @property
    def layout(self) -> KeyboardLayout:
        return self._layout

    def left_neighbor(self, char: str) -> Optional[str]:
        """Key immediately left of char, or None at a row edge or for unknown keys."""
        return self._left.get(char.lower())

    def right_neighbor(self, char: str) -> Optional[str]:
        """Key immediately right of char, or None at a row edge or for unknown keys."""
        return self._right.get(char.lower())

    def neighbors(self, char: str) -> list[str]:
        """Left then right neighbour, skipping missing ones."""
        return [
            key for key in (self.left_neighbor(char), self.right_neighbor(char))
            if key is not None
        ]
