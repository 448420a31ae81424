import io

import pytest

from labworks.greetings import (
    eccentric,
    fun,
    hello,
    interactive_hello,
    main,
    sum_of_fun,
)

HEADER = "Berkeley eccentrics:\n====================\n"


def test_eccentric_defaults():
    assert eccentric(3, 3, 3, 3) == (
        HEADER + "Happy Happy Happy \n" + "Yoshua\n" + "Go BEARS!\n"
    )


def test_eccentric_fallthrough_to_default():
    assert eccentric(0, 5, 0, 1) == (
        HEADER + "\n" + "Hat Lady\n" + "I don't know these people!\n" + "Boo CARDINAL!\n"
    )


def test_eccentric_fallthrough_case_zero():
    out = eccentric(1, 0, 1, 3)
    assert out.endswith("Happy \nYoshua\nTriangle Man\nGo BEARS!\n")


def test_eccentric_case_two_falls_into_three():
    out = eccentric(0, 2, 1, 3)
    assert "Chinese Erhu Guy\nYoshua\n" in out
    assert "Dr. Jokemon" not in out


@pytest.mark.parametrize("v1", [4, 1])
def test_eccentric_breaking_cases_print_one_line(v1):
    body = eccentric(0, v1, 1, 3)[len(HEADER) + 1:]
    assert body.count("\n") == 2


def test_eccentric_unknown_value():
    assert "I don't know these people!\n" in eccentric(0, 42, 1, 3)


def test_hello_message():
    assert hello() == "Thanks for waddling through this program. Have a nice day."


def test_interactive_hello_includes_name():
    out = interactive_hello("Ann\n")
    assert out.startswith("What's your name?\n")
    assert "Hey, Ann\nI just really wanted to say hello to you." in out
    assert out.endswith("I hope you have a wonderful day.")


def test_interactive_hello_uses_first_line_only():
    out = interactive_hello("Ann\nBob\n")
    assert "Bob" not in out


def test_interactive_hello_truncates_long_name():
    out = interactive_hello("x" * 100)
    assert "x" * 79 in out
    assert "x" * 80 not in out


def test_fun_zero_points():
    assert fun(0) == 0
    assert fun(-1) == 0


def test_fun_never_positive_for_integers():
    assert all(fun(x) <= 0 for x in range(-20, 20))


def test_sum_of_fun_default():
    assert sum_of_fun() == -156


def test_sum_of_fun_stops_at_zero():
    assert sum_of_fun([3, 0, 5]) == fun(3)
    assert sum_of_fun([0, 1]) == 0


def test_main_hello(capsys):
    assert main(["hello"]) == 0
    assert capsys.readouterr().out == hello()


def test_main_eccentric(capsys):
    main(["eccentric", "--v0", "1", "--v2", "0"])
    assert capsys.readouterr().out == eccentric(1, 3, 0, 3)


def test_main_interactive(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Zed\n"))
    main(["interactive"])
    assert capsys.readouterr().out == interactive_hello("Zed\n")


def test_main_ex2(capsys):
    main(["ex2"])
    assert capsys.readouterr().out.strip() == str(sum_of_fun())