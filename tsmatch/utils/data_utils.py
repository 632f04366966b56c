"""Functions for moving ratings in and out of tables so callers can store them between matches"""

from typing import List, Optional, Sequence
import polars as pl
from tsmatch.core.rating import Rating


def ratings_to_frame(ratings: Sequence[Rating], ids: Optional[Sequence] = None) -> pl.DataFrame:
    """
    Builds a table with one row per rating.

    Parameters:
        ratings (Sequence[Rating]): the ratings to store
        ids (Sequence, optional): competitor identifiers, stored in an 'id' column when given

    Returns:
        pl.DataFrame: columns id (optional), mean, variance and sigma
    """
    if ids is not None and len(ids) != len(ratings):
        raise ValueError(f'got {len(ids)} ids for {len(ratings)} ratings')
    data = {}
    if ids is not None:
        data['id'] = list(ids)
    data['mean'] = pl.Series([rating.mean for rating in ratings], dtype=pl.Float64)
    data['variance'] = pl.Series([rating.variance for rating in ratings], dtype=pl.Float64)
    df = pl.DataFrame(data)
    return df.with_columns(pl.col('variance').sqrt().alias('sigma'))


def ratings_from_frame(df: pl.DataFrame, mean_col: str = 'mean', variance_col: str = 'variance') -> List[Rating]:
    """Reads ratings back from a table, falling back to squaring a 'sigma' column when there is no variance column"""
    if mean_col not in df.columns:
        raise ValueError(f'missing mean column {mean_col!r}')
    if variance_col in df.columns:
        variances = df[variance_col].cast(pl.Float64)
    elif 'sigma' in df.columns:
        variances = df['sigma'].cast(pl.Float64) ** 2
    else:
        raise ValueError(f'missing variance column {variance_col!r} and no sigma column')
    means = df[mean_col].cast(pl.Float64)
    return [Rating(mean, variance) for mean, variance in zip(means.to_list(), variances.to_list())]
