import pytest

from services.confirmation import ConfirmationGate
from utils.errors import ValidationError


@pytest.fixture
def gate():
    return ConfirmationGate()


def test_nothing_runs_before_confirm(gate):
    ran = []
    token = gate.request("Delete?", "Sure?", lambda: ran.append(1))
    assert ran == []
    assert gate.pending is token
    assert (token.title, token.message) == ("Delete?", "Sure?")


def test_confirm_runs_action_once(gate):
    ran = []
    token = gate.request("Delete?", "Sure?", lambda: ran.append(1) or "done")
    assert gate.confirm(token) == "done"
    assert ran == [1]
    assert gate.pending is None
    with pytest.raises(ValidationError):
        gate.confirm(token)
    assert ran == [1]


def test_cancel_discards_action(gate):
    ran = []
    token = gate.request("Delete?", "Sure?", lambda: ran.append(1))
    assert gate.cancel(token) is True
    assert gate.pending is None
    with pytest.raises(ValidationError):
        gate.confirm(token)
    assert ran == []


def test_cancel_of_stale_token_is_noop(gate):
    first = gate.request("a", "a", lambda: None)
    second = gate.request("b", "b", lambda: None)
    assert gate.cancel(first) is False
    assert gate.pending is second


def test_new_request_supersedes_previous(gate):
    ran = []
    first = gate.request("a", "a", lambda: ran.append("a"))
    second = gate.request("b", "b", lambda: ran.append("b"))
    assert first.id != second.id
    with pytest.raises(ValidationError):
        gate.confirm(first)
    gate.confirm(second)
    assert ran == ["b"]


def test_token_spent_even_if_action_fails(gate):
    def boom():
        raise RuntimeError("server down")

    token = gate.request("a", "a", boom)
    with pytest.raises(RuntimeError):
        gate.confirm(token)
    assert gate.pending is None
