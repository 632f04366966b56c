"""value types shared by the rating systems"""
import enum
import math
from dataclasses import dataclass
from typing import Iterable


class Score(enum.Enum):
    """the result of team1 against team2"""

    WIN = 'win'
    LOSS = 'loss'
    DRAW = 'draw'


@dataclass(frozen=True)
class Rating:
    """
    A gaussian belief about the skill of a competitor, or about the joint performance of a team.

    Attributes:
        mean (float): the skill estimate
        variance (float): the uncertainty of the estimate, sigma squared
    """

    mean: float
    variance: float

    @classmethod
    def from_sigma(cls, mu: float, sigma: float) -> 'Rating':
        return cls(mean=mu, variance=sigma**2.0)

    @classmethod
    def combine(cls, ratings: Iterable['Rating']) -> 'Rating':
        """aggregate ratings into one by summing means and variances"""
        return sum(ratings, cls(0.0, 0.0))

    @classmethod
    def from_dict(cls, record: dict) -> 'Rating':
        return cls(mean=float(record['mean']), variance=float(record['variance']))

    @property
    def mu(self) -> float:
        return self.mean

    @property
    def sigma(self) -> float:
        return math.sqrt(self.variance)

    def to_dict(self) -> dict:
        return {'mean': self.mean, 'variance': self.variance}

    def __add__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return Rating(self.mean + other.mean, self.variance + other.variance)

    def __radd__(self, other):
        # lets the builtin sum start from 0
        if other == 0:
            return self
        return self.__add__(other)
