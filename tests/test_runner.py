from jet_stack.env.simulator import SimConfig
from jet_stack.simulation.runner import simulate, simulate_all, simulate_parallel

EXAMPLE = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"


def test_simulate_uses_fresh_simulator():
    assert simulate(EXAMPLE, 2022) == 3068
    assert simulate(EXAMPLE, 2022) == 3068
    assert simulate(">", 1) == 1


def test_simulate_all_groups_by_drop_count():
    results = simulate_all([EXAMPLE, ">"], [1, 2022])
    assert results == [[1, 1], [3068, simulate(">", 2022)]]


def test_simulate_all_respects_config():
    config = SimConfig(detect_cycles=False)
    assert simulate_all([EXAMPLE], [2022], config=config) == [[3068]]


def test_simulate_parallel_keeps_order():
    patterns = [EXAMPLE, ">", "<"]
    expected = [simulate(p, 100) for p in patterns]
    assert simulate_parallel(patterns, 100, processes=2) == expected


def test_verbose_logs_to_stderr(capsys):
    simulate_all([">"], [3], verbose=True)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[worker]" in captured.err
    assert "[runner] drops=3" in captured.err
