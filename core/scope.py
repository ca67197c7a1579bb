"""
Structural scope tracking for the line-based property scan.

The tracker keeps the chain of enclosing names (the top-level type followed by
every object-valued property currently open) and a brace-nesting counter.
Each name remembers the depth at which its body lives, so it is dropped as
soon as the braces that opened it are closed again.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class _Frame:
    name: str
    level: int


class ScopeTracker:
    """
    Stack-like structural path plus nesting depth.

    Lifecycle per top-level type:
    1. `begin_type()` when a type declaration starts.
    2. `push()` for each nested object-valued property.
    3. `apply_braces()` once per scanned line with that line's brace counts.
    4. Depth reaching zero resets the tracker, which ends the type.
    """

    def __init__(self) -> None:
        self._frames: list[_Frame] = []
        self.depth: int = 0
        self._awaiting_body: bool = False

    @property
    def inside_type(self) -> bool:
        return bool(self._frames)

    @property
    def path(self) -> str:
        """Dot-joined chain of enclosing names, e.g. "Root.config.database"."""
        return ".".join(frame.name for frame in self._frames)

    def child_path(self, name: str) -> str:
        return f"{self.path}.{name}" if self._frames else name

    def begin_type(self, name: str, awaiting_body: bool = False) -> None:
        """
        Start a new top-level type, discarding whatever scope was open.

        Args:
            name: The declared type name; becomes the root of the path.
            awaiting_body: True when the declaration line has no opening brace
                yet (`type X =` with the body on the next line). If the next
                scanned line does not open a brace either, the type is abandoned.
        """
        self._frames = [_Frame(name, 1)]
        self.depth = 0
        self._awaiting_body = awaiting_body

    def push(self, name: str) -> None:
        """Enter an object-valued property. Must precede that line's `apply_braces()`."""
        if self._frames:
            self._frames.append(_Frame(name, self.depth + 1))

    def apply_braces(self, opening: int, closing: int) -> None:
        """Adjust the depth by one line's brace counts and close finished scopes."""
        if not self._frames:
            return

        if self._awaiting_body:
            self._awaiting_body = False
            if opening == 0:
                self.reset()
                return

        self.depth += opening - closing
        if self.depth <= 0:
            self.reset()
            return

        # The root frame only goes away through reset()
        while len(self._frames) > 1 and self._frames[-1].level > self.depth:
            self._frames.pop()

    def reset(self) -> None:
        self._frames = []
        self.depth = 0
        self._awaiting_body = False
