import math

import pytest

from scalargrad.cli import main, run_check, run_example


def test_example_describes_four_values():
    text = run_example()
    blocks = [block for block in text.split("\n\n") if block]
    assert len(blocks) == 4
    assert all(block.startswith("<numeric: (") and block.endswith(">") for block in blocks)


def test_example_reports_grads_for_inputs_only():
    text = run_example()
    assert text.count("grad:") == 3
    assert "<numeric: (-3.600000)\n    grad: (" in text


def test_example_loss_and_divisor_grad():
    blocks = [block for block in run_example().split("\n\n") if block]
    u = -3.6 - 2.312
    assert blocks[0] == f"<numeric: ({math.cos(u) / 2:f})>"
    assert blocks[3] == f"<numeric: (2.000000)\n    grad: ({-math.cos(u) / 4:f})>"


def test_check_reports_loss_and_every_gradient():
    lines = run_check().splitlines()
    labels = [line.split(":")[0] for line in lines]
    assert labels == ["loss", "a_grad", "b_grad", "c_grad", "d_grad", "e_grad"]


def test_check_values_have_six_decimals():
    for line in run_check().splitlines():
        value = line.split(": ")[1]
        float(value)
        assert len(value.split(".")[1]) == 6


def test_main_prints_example(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == run_example()


def test_main_prints_check(capsys):
    assert main(["--check"]) == 0
    assert capsys.readouterr().out == run_check()


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2