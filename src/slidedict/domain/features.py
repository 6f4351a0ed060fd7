"""Feature vector produced for a single word."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureVector:
    """Slide parameters of one word.

    Slot 0 is reserved and always 0.0. The next ``coefficient_count`` slots
    hold the leading wavelet coefficients of the x signal, followed by the
    same number of coefficients of the y signal.

    Attributes:
        values: The parameters, in output order
    """

    values: tuple[float, ...]

    @classmethod
    def assemble(
        cls,
        x_coefficients: Sequence[float],
        y_coefficients: Sequence[float],
        coefficient_count: int,
    ) -> "FeatureVector":
        """Build a vector from the transformed x and y signals.

        Raises:
            ValueError: If either signal has fewer than coefficient_count values
        """
        if min(len(x_coefficients), len(y_coefficients)) < coefficient_count:
            raise ValueError(
                f"Need {coefficient_count} coefficients per axis, got "
                f"{len(x_coefficients)} and {len(y_coefficients)}"
            )
        values = [0.0]
        values.extend(float(v) for v in x_coefficients[:coefficient_count])
        values.extend(float(v) for v in y_coefficients[:coefficient_count])
        return cls(tuple(values))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "FeatureVector":
        return cls(tuple(float(v) for v in values))

    @property
    def coefficient_count(self) -> int:
        """Coefficients per axis."""
        return (len(self.values) - 1) // 2

    @property
    def x_coefficients(self) -> tuple[float, ...]:
        return self.values[1 : 1 + self.coefficient_count]

    @property
    def y_coefficients(self) -> tuple[float, ...]:
        return self.values[1 + self.coefficient_count :]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def to_list(self) -> list[float]:
        """Convert to a plain list for IPC."""
        return list(self.values)
