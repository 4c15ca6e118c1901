from coursekit.dyad import Dyad, main


def test_defaults_are_zero():
    assert Dyad().values() == (0, 0)


def test_values_in_order():
    assert Dyad(1, 2).values() == (1, 2)


def test_swap_exchanges():
    dyad = Dyad(1.5, 2.5)
    dyad.swap()
    assert dyad.values() == (2.5, 1.5)
    assert dyad.first == 2.5


def test_double_swap_is_identity():
    dyad = Dyad("A", "B")
    dyad.swap()
    dyad.swap()
    assert dyad.values() == ("A", "B")


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "First int: 1\nSecond int: 2\n" in out
    assert "First int after swap: 2\nSecond int after swap: 1" in out
    assert "First double after swap: 2.5\nSecond double after swap: 1.5" in out
    assert "First char after swap: B\nSecond char after swap: A" in out