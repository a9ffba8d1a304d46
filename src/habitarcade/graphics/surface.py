"""
Drawing surfaces.

A surface is a fixed-size RGB area that games repaint on every state
change. Hosts read the buffer back to show it (pygame window) or keep it
for inspection (tests, headless runs).
"""

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray


class Surface(ABC):
    """Abstract drawable area of fixed pixel dimensions."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Surface width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Surface height in pixels."""
        ...

    @abstractmethod
    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        """
        Replace surface contents.

        Args:
            buffer: numpy array of shape (height, width, 3) with RGB values
        """
        ...

    @abstractmethod
    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current contents."""
        ...

    def new_frame(self) -> NDArray[np.uint8]:
        """Blank buffer matching this surface."""
        return np.zeros((self.height, self.width, 3), dtype=np.uint8)


class BufferSurface(Surface):
    """In-memory surface backed by a numpy array."""

    def __init__(self, width: int = 300, height: int = 300) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid surface size: {width}x{height}")
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.frames_presented = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        if buffer.shape != self._buffer.shape:
            raise ValueError(
                f"Buffer shape {buffer.shape} does not match surface {self._buffer.shape}"
            )
        np.copyto(self._buffer, buffer)
        self.frames_presented += 1

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()
