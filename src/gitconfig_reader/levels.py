import enum


class Level(enum.IntEnum):
    """Configuration scope. Lower values take precedence in a search."""

    UNSPECIFIED = 0
    LOCAL = 1
    GLOBAL = 2
    SYSTEM = 3

    @classmethod
    def from_selector(cls, selector):
        """Map a level selector onto a Level.

        Accepts a Level, an int or a level name. Integers outside the
        recognized codes (negative numbers, 99, ...) fall back to
        UNSPECIFIED, which means "search every level".
        """
        if selector is None:
            return cls.UNSPECIFIED
        if isinstance(selector, str):
            try:
                return cls[selector.upper()]
            except KeyError:
                raise ValueError(
                    f"unknown configuration level: {selector!r}"
                ) from None
        try:
            return cls(selector)
        except ValueError:
            return cls.UNSPECIFIED


# search order for an unspecified level
precedence = (Level.LOCAL, Level.GLOBAL, Level.SYSTEM)
