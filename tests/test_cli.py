from citygen.cli import main


def test_valid_limit(capsys):
    assert main(["5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Starting full city generation"
    assert out[-1] == "Generated 5 segments."


def test_leading_digits_are_used(capsys):
    assert main(["7abc"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Generated 7 segments."


def test_zero_is_rejected(capsys):
    assert main(["0"]) == 1
    assert capsys.readouterr().out == "Invalid segment limit. Must be > 0\n"


def test_negative_is_rejected(capsys):
    assert main(["-3"]) == 1
    assert "Invalid segment limit" in capsys.readouterr().out


def test_non_numeric_is_rejected(capsys):
    assert main(["many"]) == 1
    assert "Must be > 0" in capsys.readouterr().out


def test_extra_arguments_ignored(capsys):
    assert main(["3", "ignored"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Generated 3 segments."