from tsmatch.core.rating import Rating, Score
from tsmatch.core.base import TwoTeamRatingSystem, ConfigurationError, IllDefinedMatchError
