import pytest
import polars as pl
from tsmatch import Rating, TrueSkill, Score, ratings_to_frame, ratings_from_frame

RATINGS = [Rating(2.2, 2.89), Rating(36.7, 1.0), Rating(20.3, 25.0)]


def test_to_frame():
    df = ratings_to_frame(RATINGS)
    assert df.columns == ['mean', 'variance', 'sigma']
    assert df['mean'].to_list() == [2.2, 36.7, 20.3]
    assert df['sigma'].to_list() == pytest.approx([1.7, 1.0, 5.0])


def test_to_frame_with_ids():
    df = ratings_to_frame(RATINGS, ids=['ann', 'bo', 'cy'])
    assert df.columns == ['id', 'mean', 'variance', 'sigma']
    assert df['id'].to_list() == ['ann', 'bo', 'cy']


def test_ids_must_line_up():
    with pytest.raises(ValueError):
        ratings_to_frame(RATINGS, ids=['ann'])


def test_round_trip():
    assert ratings_from_frame(ratings_to_frame(RATINGS)) == RATINGS


def test_round_trip_after_update():
    env = TrueSkill()
    new_team1, new_team2 = env.update(RATINGS[:1], RATINGS[1:], Score.WIN)
    df = ratings_to_frame(new_team1 + new_team2, ids=[0, 1, 2])
    assert ratings_from_frame(df) == new_team1 + new_team2


def test_from_sigma_column():
    df = pl.DataFrame({'skill': [25.0, 30.0], 'sigma': [3.0, 0.5]})
    assert ratings_from_frame(df, mean_col='skill') == [Rating(25.0, 9.0), Rating(30.0, 0.25)]


def test_from_integer_columns():
    df = pl.DataFrame({'mean': [25, 30], 'variance': [9, 1]})
    assert ratings_from_frame(df) == [Rating(25.0, 9.0), Rating(30.0, 1.0)]


def test_missing_columns():
    with pytest.raises(ValueError):
        ratings_from_frame(pl.DataFrame({'variance': [1.0]}))
    with pytest.raises(ValueError):
        ratings_from_frame(pl.DataFrame({'mean': [1.0]}))
