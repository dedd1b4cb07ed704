import random
from itertools import product

import pytest

from edakit.cassette import Song, max_recording, run


def _brute_force(songs, side):
    best = 0
    for choice in product((0, 1, 2), repeat=len(songs)):
        loads = [0, 0, 0]
        score = 0
        for song, where in zip(songs, choice):
            loads[where] += song.duration
            if where:
                score += song.score
        if loads[1] <= side and loads[2] <= side:
            best = max(best, score)
    return best


def test_no_songs():
    assert max_recording([], 10) == 0


def test_song_too_long_for_either_side():
    assert max_recording([Song(11, 4)], 10) == 0


def test_two_songs_use_both_sides():
    songs = [Song(10, 4), Song(10, 6)]
    assert max_recording(songs, 10) == 10


@pytest.mark.parametrize("seed", range(10))
def test_matches_exhaustive_search(seed):
    rng = random.Random(seed)
    songs = [Song(rng.randint(1, 20), rng.randint(1, 30)) for _ in range(rng.randint(1, 7))]
    side = rng.randint(5, 40)
    assert max_recording(songs, side) == _brute_force(songs, side)


def test_never_exceeds_total_score():
    songs = [Song(3, 5), Song(4, 7), Song(2, 1)]
    assert max_recording(songs, 100) == sum(song.score for song in songs)


def test_non_positive_duration_rejected():
    with pytest.raises(ValueError):
        max_recording([Song(0, 3)], 10)


def test_negative_side_rejected():
    with pytest.raises(ValueError):
        max_recording([Song(1, 3)], -1)


def test_run_matches_function():
    text = "3\n10\n6 5\n5 4\n8 9\n0\n"
    songs = [Song(6, 5), Song(5, 4), Song(8, 9)]
    assert run(text) == f"{max_recording(songs, 10)}\n"


def test_run_stops_at_zero():
    assert run("0\n1\n5\n1 1\n") == ""