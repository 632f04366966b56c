"""base class for two team rating systems"""
import itertools
import logging
import math
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple
import numpy as np
from tqdm import tqdm
from tsmatch.core.rating import Rating, Score
from tsmatch.utils.constants import MIN_VARIANCE

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """raised when a rating system is constructed with unusable parameters"""


class IllDefinedMatchError(ValueError):
    """raised when beta and every variance in a match are zero so nothing can be normalized"""


class TwoTeamRatingSystem(ABC):
    """
    Base class for gaussian rating systems where exactly two teams meet. This class holds the
    environment parameters and implements the operations shared by all variants: creating ratings,
    match quality, team balancing and the dynamics/aggregation/per player steps of the update.

    Instances are immutable so one environment can back any number of independent computations.

    Attributes:
        param_names (tuple): Names of the parameters making up the serialized record of the environment.
        mu (float): Mean of the rating given to a new competitor.
        sigma (float): Standard deviation of the rating given to a new competitor.
        beta (float): Standard deviation of a single performance around the skill.
        tau (float): Standard deviation added to every skill before each match to model skill drift.
        draw_probability (float): Probability of a draw between two evenly matched teams, in [0, 1).
    """

    param_names: Tuple[str, ...] = ('mu', 'sigma', 'beta', 'tau', 'draw_probability')

    def __init__(self, mu: float, sigma: float, beta: float, tau: float, draw_probability: float = 0.0):
        """
        Initializes the environment and checks the draw probability.

        Raises:
            ConfigurationError: if draw_probability is outside of [0, 1)
        """
        if not 0.0 <= draw_probability < 1.0:
            raise ConfigurationError(f'draw_probability must be in [0, 1), got {draw_probability}')
        self._mu = float(mu)
        self._sigma = float(sigma)
        self._beta = float(beta)
        self._tau = float(tau)
        self._draw_probability = float(draw_probability)
        self.beta_squared = self._beta**2.0
        self.tau_squared = self._tau**2.0

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def tau(self) -> float:
        return self._tau

    @property
    def draw_probability(self) -> float:
        return self._draw_probability

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.param_names}

    @classmethod
    def from_dict(cls, record: dict):
        try:
            params = {name: float(record[name]) for name in cls.param_names}
        except KeyError as err:
            raise ConfigurationError(f'missing parameter {err.args[0]!r} for {cls.__name__}') from err
        return cls(**params)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self.to_dict().values()))

    def __repr__(self):
        params = ', '.join(f'{name}={value!r}' for name, value in self.to_dict().items())
        return f'{type(self).__name__}({params})'

    def create_rating(self) -> Rating:
        """the prior given to a competitor who has never played"""
        return Rating(self._mu, self._sigma**2.0)

    @abstractmethod
    def draw_margin(self, num_players: int) -> float:
        """
        Computes the performance gap below which the match is a draw.

        Parameters:
            num_players (int): total number of competitors on both teams
        """
        raise NotImplementedError

    @abstractmethod
    def get_v_and_w(self, norm_diff: float, norm_margin: float, score: Score) -> Tuple[float, float]:
        """
        Computes the mean and variance corrections of the team performance difference given the outcome.

        Parameters:
            norm_diff (float): difference of the team means divided by the combined deviation
            norm_margin (float): draw margin divided by the combined deviation
            score (Score): WIN or DRAW, losses are turned into wins before reaching here
        """
        raise NotImplementedError

    def _combined_sigma2(self, num_players: int, sigma2_1: float, sigma2_2: float) -> float:
        combined_sigma2 = num_players * self.beta_squared + (sigma2_1 + sigma2_2)
        if not combined_sigma2 > 0.0:
            raise IllDefinedMatchError(
                f'combined variance is {combined_sigma2} for a match of {num_players} players with beta={self._beta}'
            )
        return combined_sigma2

    def quality(self, team1: Sequence[Rating], team2: Sequence[Rating]) -> float:
        """
        Computes how evenly matched two teams are, 1 being a perfect coin flip.

        Parameters:
            team1 (Sequence[Rating]): ratings of the first team
            team2 (Sequence[Rating]): ratings of the second team

        Returns:
            float: the match quality, in [0, 1] up to floating point error

        Raises:
            IllDefinedMatchError: if beta and every variance are zero
        """
        rating_1 = Rating.combine(team1)
        rating_2 = Rating.combine(team2)
        num_players = len(team1) + len(team2)
        n_beta_squared = num_players * self.beta_squared
        combined_sigma2 = self._combined_sigma2(num_players, rating_1.variance, rating_2.variance)
        rating_diff = rating_1.mean - rating_2.mean
        return math.sqrt(n_beta_squared / combined_sigma2) * math.exp(-(rating_diff**2.0) / (2.0 * combined_sigma2))

    def update(
        self,
        team1: Sequence[Rating],
        team2: Sequence[Rating],
        score,
    ) -> Tuple[List[Rating], List[Rating]]:
        """
        Computes the ratings of every competitor after a match. The inputs are left untouched.

        Parameters:
            team1 (Sequence[Rating]): ratings of the first team before the match
            team2 (Sequence[Rating]): ratings of the second team before the match
            score (Score or str): result of team1 against team2, 'win', 'loss' or 'draw' are accepted too

        Returns:
            tuple: new ratings of team1 and of team2, in the order they were given

        Raises:
            ValueError: if score is not a valid Score
            IllDefinedMatchError: if beta and every variance are zero
        """
        score = Score(score)
        if score is Score.LOSS:
            new_team2, new_team1 = self.update(team2, team1, Score.WIN)
            return new_team1, new_team2

        num_1 = len(team1)
        num_players = num_1 + len(team2)
        mus = np.array([rating.mean for rating in itertools.chain(team1, team2)], dtype=np.float64)
        sigma2s = np.array([rating.variance for rating in itertools.chain(team1, team2)], dtype=np.float64)
        sigma2s = sigma2s + self.tau_squared  # dynamics

        rating_diff = mus[:num_1].sum() - mus[num_1:].sum()
        combined_sigma2 = self._combined_sigma2(num_players, sigma2s[:num_1].sum(), sigma2s[num_1:].sum())
        combined_dev = math.sqrt(combined_sigma2)
        norm_diff = rating_diff / combined_dev
        norm_margin = self.draw_margin(num_players) / combined_dev

        v, w = self.get_v_and_w(norm_diff, norm_margin, score)
        logger.debug(
            '%s update: c=%.6f t=%.6f eps=%.6f v=%.6f w=%.6f', score.value, combined_dev, norm_diff, norm_margin, v, w
        )

        sign_multipliers = np.ones(num_players, dtype=np.float64)
        sign_multipliers[num_1:] = -1.0
        new_mus = mus + sign_multipliers * (sigma2s / combined_dev) * v
        new_sigma2s = np.maximum(sigma2s * (1.0 - (sigma2s / combined_sigma2) * w), MIN_VARIANCE)

        new_ratings = [Rating(float(mu), float(sigma2)) for mu, sigma2 in zip(new_mus, new_sigma2s)]
        return new_ratings[:num_1], new_ratings[num_1:]

    def update_inplace(self, team1: List[Rating], team2: List[Rating], score) -> None:
        """same as update but writes the new ratings back into the given lists"""
        new_team1, new_team2 = self.update(team1, team2, score)
        team1[:] = new_team1
        team2[:] = new_team2

    def balance(
        self,
        players: Sequence[Rating],
        method: str = 'iterative',
        verbose: bool = False,
    ) -> Tuple[List[int], List[int]]:
        """
        Splits a roster into the two teams giving the highest match quality by trying every split.
        The first player always goes to the first team since swapping the sides does not change quality.
        Cost grows as C(n - 1, n // 2) so this is meant for rosters of about 16 players or fewer.

        Parameters:
            players (Sequence[Rating]): ratings of the whole roster
            method (str, optional): 'iterative' scores the splits one at a time, 'batched' scores them all
                                    at once with numpy. Defaults to 'iterative'. The batched sums can differ
                                    from the iterative ones in the last bit, so splits whose qualities tie
                                    exactly in theory may be resolved differently by the two methods.
            verbose (bool, optional): show a progress bar in iterative mode. Defaults to False.

        Returns:
            tuple: sorted indices of the players on team1 and on team2, ties go to the first split seen
        """
        if len(players) == 0:
            return [], []
        if method == 'iterative':
            return self.iterative_balance(players, verbose=verbose)
        elif method == 'batched':
            return self.batched_balance(players)
        raise ValueError(f'Invalid balance method {method}')

    def iterative_balance(self, players: Sequence[Rating], verbose: bool = False) -> Tuple[List[int], List[int]]:
        """score the splits one at a time"""
        num_players = len(players)
        team_size = num_players // 2
        num_splits = math.comb(num_players - 1, team_size)
        best_quality = -math.inf
        best_teams = None
        splits = itertools.combinations(range(1, num_players), team_size)
        for team2 in tqdm(splits, total=num_splits, disable=not verbose):
            on_team2 = set(team2)
            team1 = [idx for idx in range(num_players) if idx not in on_team2]
            quality = self.quality([players[idx] for idx in team1], [players[idx] for idx in team2])
            if quality > best_quality:
                best_quality = quality
                best_teams = (team1, list(team2))
        logger.debug('searched %d splits of %d players, best quality %.6f', num_splits, num_players, best_quality)
        return best_teams

    def batched_balance(self, players: Sequence[Rating]) -> Tuple[List[int], List[int]]:
        """score every split in one vectorized pass"""
        num_players = len(players)
        team_size = num_players // 2
        num_splits = math.comb(num_players - 1, team_size)
        team2_masks = np.zeros(shape=(num_splits, num_players), dtype=np.bool_)
        for row, team2 in enumerate(itertools.combinations(range(1, num_players), team_size)):
            team2_masks[row, list(team2)] = True
        team1_masks = ~team2_masks

        mus = np.array([player.mean for player in players], dtype=np.float64)
        sigma2s = np.array([player.variance for player in players], dtype=np.float64)
        rating_diffs = team1_masks.astype(np.float64) @ mus - team2_masks.astype(np.float64) @ mus
        sigma2_1 = team1_masks.astype(np.float64) @ sigma2s
        sigma2_2 = team2_masks.astype(np.float64) @ sigma2s

        n_beta_squared = num_players * self.beta_squared
        combined_sigma2s = n_beta_squared + (sigma2_1 + sigma2_2)
        if not (combined_sigma2s > 0.0).all():
            raise IllDefinedMatchError(f'combined variance is zero for a roster of {num_players} players')
        qualities = np.sqrt(n_beta_squared / combined_sigma2s) * np.exp(-np.square(rating_diffs) / (2.0 * combined_sigma2s))

        best_idx = int(np.argmax(qualities))
        logger.debug('searched %d splits of %d players, best quality %.6f', num_splits, num_players, qualities[best_idx])
        team1 = np.flatnonzero(team1_masks[best_idx]).tolist()
        team2 = np.flatnonzero(team2_masks[best_idx]).tolist()
        return team1, team2
