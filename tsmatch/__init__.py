"""TrueSkill ratings, match quality and team balancing for two team matches"""
from tsmatch.core import Rating, Score, TwoTeamRatingSystem, ConfigurationError, IllDefinedMatchError
from tsmatch.models import TrueSkill, SimpleTrueSkill
from tsmatch.utils import pdf, cdf, inverse_cdf, ratings_to_frame, ratings_from_frame

__all__ = [
    'Rating',
    'Score',
    'TwoTeamRatingSystem',
    'ConfigurationError',
    'IllDefinedMatchError',
    'TrueSkill',
    'SimpleTrueSkill',
    'pdf',
    'cdf',
    'inverse_cdf',
    'ratings_to_frame',
    'ratings_from_frame',
]
