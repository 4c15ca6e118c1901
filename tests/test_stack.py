import pytest

from coursekit.stack import Stack, StackEmptyError, StackFullError, main


def test_lifo_order():
    stack = Stack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = Stack(3)
    stack.push("x")
    assert stack.peek() == "x"
    assert len(stack) == 1


def test_default_capacity():
    assert Stack().capacity == 100


def test_push_when_full_raises():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert len(stack) == 2


def test_pop_and_peek_when_empty_raise():
    stack = Stack(2)
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_zero_capacity_is_always_full():
    stack = Stack(0)
    assert stack.is_full() and stack.is_empty()
    with pytest.raises(StackFullError):
        stack.push(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


def test_clear_empties():
    stack = Stack(4)
    stack.push(1)
    stack.push(2)
    stack.clear()
    assert len(stack) == 0
    assert stack.is_empty()


def test_main_output(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0] == "pushed: 10"
    assert lines[1] == "numValues: 1\tpeeked: 10"
    assert "pushed: 100" in lines
    assert "numValues: 10\tpeeked: 100" in lines
    assert "popped: 100" in lines
    assert "numValues: 9\tpeeked: 90" in lines
    assert lines[-2:] == ["popped: 10", "numValues: 0"]
    assert "stack is full" in captured.err
    assert captured.err.count("stack is empty") == 2