import pytest

from dsapuzzles.codyssi.siren_disruption import solve


def test_single_swap_agrees_in_every_mode():
    assert solve("10\n20\n30\n\n1-2\n\n1\n") == (20, 20, 20)


def test_untouched_track_stays_put():
    assert solve("10\n20\n30\n\n1-2\n\n3") == (30, 30, 30)


def test_block_swap_moves_whole_block():
    text = "11\n22\n33\n44\n\n1-3\n\n2"
    paired, _, blocks = solve(text)
    assert paired == 22
    assert blocks == 44


def test_results_come_from_the_tracks():
    tracks = [5, 8, 13, 21, 34]
    text = "\n".join(map(str, tracks)) + "\n\n1-4\n2-5\n3-1\n\n2"
    assert all(value in tracks for value in solve(text))


def test_query_position_zero():
    with pytest.raises(ValueError):
        solve("10\n20\n\n1-2\n\n0")


def test_missing_sections():
    with pytest.raises(ValueError):
        solve("10\n20\n\n1-2")