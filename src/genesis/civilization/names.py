"""City name generation."""

import numpy as np

NAME_PREFIXES: tuple[str, ...] = (
    "New", "Port", "Mount", "Lake", "North", "South", "East", "West",
    "Fort", "Saint", "Royal", "Grand", "Old", "Upper", "Lower",
)

NAME_SUFFIXES: tuple[str, ...] = (
    "haven", "burg", "ville", "ton", "ford", "bridge", "field", "wood",
    "hill", "vale", "shore", "cliff", "rapids", "falls", "meadow", "grove",
    "ridge", "crest", "view", "harbor",
)


class NameGenerator:
    """Draws "<prefix> <suffix>" names from a seeded generator."""

    def __init__(
        self,
        rng: np.random.Generator,
        prefixes: tuple[str, ...] = NAME_PREFIXES,
        suffixes: tuple[str, ...] = NAME_SUFFIXES,
    ):
        if not prefixes or not suffixes:
            raise ValueError("Name word lists must not be empty")
        self.rng = rng
        self.prefixes = prefixes
        self.suffixes = suffixes

    def generate(self) -> str:
        """Return a new city name. Names may repeat."""
        prefix = self.prefixes[int(self.rng.integers(len(self.prefixes)))]
        suffix = self.suffixes[int(self.rng.integers(len(self.suffixes)))]
        return f"{prefix} {suffix}"
