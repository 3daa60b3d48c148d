class ColorSpace:
    """
        The alphabet of valid peg colors, the integers in [0, size).
    Attributes:
        size (int): Number of distinct colors."""

    def __init__(self, size: int):
        """
        Initialize a ColorSpace instance.

        Args:
            size (int): Number of colors, must be at least 1.
        """

        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"Color count must be an integer, got {size!r}.")
        if size <= 0:
            raise ValueError(f"Color count must be positive, but got {size}.")
        self._size = size

    def length(self) -> int:
        """
        Return the number of colors.

        Returns:
            int: The size of the color space.
        """

        return self._size

    def __contains__(self, value) -> bool:
        return isinstance(value, int) and 0 <= value < self._size

    def __repr__(self):
        return f"ColorSpace({self._size})"
