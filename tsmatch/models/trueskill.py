"""TrueSkill"""
from tsmatch.core.base import TwoTeamRatingSystem
from tsmatch.core.rating import Score
from tsmatch.utils.math_utils import draw_margin, v_and_w_win_scalar, v_and_w_draw_scalar


class TrueSkill(TwoTeamRatingSystem):
    """
    The og TrueSkill rating system shoutout to Microsoft, restricted to two teams.

    A draw is any match where the performance difference falls within a margin derived from
    the draw probability, so wins and draws truncate the performance difference to different regions.
    """

    def __init__(
        self,
        mu: float = 25.0,
        sigma: float = 25.0 / 3.0,
        beta: float = 25.0 / 6.0,
        tau: float = 25.0 / 300.0,
        draw_probability: float = 0.1,
    ):
        """
        Initializes the TrueSkill environment with the given parameters.

        Parameters:
            mu (float, optional): Initial mean of a new competitor. Defaults to 25.0.
            sigma (float, optional): Initial standard deviation of a new competitor. Defaults to 25/3.
            beta (float, optional): Standard deviation of performance around skill. Defaults to 25/6.
            tau (float, optional): Skill drift added before every match. Defaults to 25/300.
            draw_probability (float, optional): Chance of a draw between equal teams, in [0, 1). Defaults to 0.1.
        """
        super().__init__(mu=mu, sigma=sigma, beta=beta, tau=tau, draw_probability=draw_probability)

    def draw_margin(self, num_players: int) -> float:
        return draw_margin(self.draw_probability, num_players, self.beta)

    def get_v_and_w(self, norm_diff, norm_margin, score):
        if score is Score.DRAW:
            return v_and_w_draw_scalar(norm_diff, norm_margin)
        return v_and_w_win_scalar(norm_diff, norm_margin)
