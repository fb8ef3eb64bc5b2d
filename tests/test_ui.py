import pytest
from docopt import DocoptExit
from xduce.ui import xduce_ui
from xduce.scenarios import SCENARIOS, get_scenario, render

def test_scenarios():
    assert get_scenario('a').run() == [4, 6]
    assert get_scenario('b').run() == [6, 10, 15, 21]
    assert get_scenario('c').run() == [7, 9, 11]
    assert get_scenario('d').run() == ["elements[1]=a", "elements[2]=b", "elements[3]=c"]
    assert get_scenario('e').run() == ["elements[1]=4", "elements[3]=6", "elements[5]=8"]

def test_scenarios_are_rerunnable():
    for scenario in SCENARIOS.values():
        assert scenario.run() == scenario.run()

def test_unknown_scenario():
    with pytest.raises(ValueError):
        get_scenario('zz')

def test_render():
    assert render([1, "a"]) == ["1", "a"]

def test_xduce_list(capsys):
    r = xduce_ui(['list'])
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert [line.split("\t")[0] for line in lines] == ['a', 'b', 'c', 'd', 'e']
    assert lines[0] == "a\t" + SCENARIOS['a'].description
    assert captured.err == ""
    assert r == 0

def test_xduce_run(capsys):
    r = xduce_ui(['run', 'a', 'd'])
    captured = capsys.readouterr()
    assert captured.out == \
        "== a: double, keep 3 < x < 10, take 2\n" \
        "4\n" \
        "6\n" \
        "== d: enumerate from 1, take 3, format\n" \
        "elements[1]=a\n" \
        "elements[2]=b\n" \
        "elements[3]=c\n"
    assert r == 0

def test_xduce_run_each(capsys):
    r = xduce_ui(['run', 'e'])
    captured = capsys.readouterr()
    assert captured.out.splitlines()[1:] == ["elements[1]=4", "elements[3]=6", "elements[5]=8"]
    assert r == 0

def test_xduce_run_all(capsys):
    r = xduce_ui(['run'])
    captured = capsys.readouterr()
    headers = [line for line in captured.out.splitlines() if line.startswith("== ")]
    assert len(headers) == len(SCENARIOS)
    assert r == 0
    r = xduce_ui(['run', '--all'])
    assert capsys.readouterr().out == captured.out
    assert r == 0

def test_xduce_run_unknown(capsys):
    r = xduce_ui(['run', 'zz', 'c'])
    captured = capsys.readouterr()
    assert captured.out == \
        "Unknown scenario: zz\n" \
        "== c: pairwise sums of two sources above 5\n" \
        "7\n" \
        "9\n" \
        "11\n"
    assert r == 1

def test_xduce_bad_usage():
    with pytest.raises(DocoptExit):
        xduce_ui(['frobnicate'])
