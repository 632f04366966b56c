"""TrueSkill without a draw margin"""
from tsmatch.core.base import TwoTeamRatingSystem
from tsmatch.core.rating import Score
from tsmatch.utils.math_utils import v_and_w_win_scalar


class SimpleTrueSkill(TwoTeamRatingSystem):
    """
    TrueSkill where draws are not modeled by a margin. Wins truncate the performance difference at zero
    and a draw pins it to exactly zero, which moves each team's mean toward the other by the full gap
    and removes the whole performance variance from the update.
    """

    param_names = ('mu', 'sigma', 'beta', 'tau')

    def __init__(
        self,
        mu: float = 25.0,
        sigma: float = 25.0 / 3.0,
        beta: float = 25.0 / 6.0,
        tau: float = 25.0 / 300.0,
    ):
        super().__init__(mu=mu, sigma=sigma, beta=beta, tau=tau, draw_probability=0.0)

    def draw_margin(self, num_players: int) -> float:
        return 0.0

    def get_v_and_w(self, norm_diff, norm_margin, score):
        if score is Score.DRAW:
            return -norm_diff, 1.0
        return v_and_w_win_scalar(norm_diff, 0.0)
