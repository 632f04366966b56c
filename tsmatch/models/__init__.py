"""
Models Module
=============

This module contains the two team TrueSkill environments. Both share match quality, team balancing and
the Bayesian update from tsmatch.core.base and differ only in how a draw is modeled.

Included Rating Systems:
- TrueSkill: draws are matches whose performance difference falls within a margin derived from the draw probability.
- SimpleTrueSkill: no draw margin, a draw pins the performance difference to zero.

Each environment is an immutable object exposing create_rating, quality, balance, update and update_inplace.
"""
from tsmatch.models.trueskill import TrueSkill
from tsmatch.models.simple_trueskill import SimpleTrueSkill

__all__ = ['TrueSkill', 'SimpleTrueSkill']
