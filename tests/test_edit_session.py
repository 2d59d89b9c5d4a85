from fakes import make_tx
from services.edit_session import CREATE, EDIT, EditSession, FormValues
from utils.date_helpers import today_str


def test_starts_in_create_mode():
    session = EditSession()
    assert session.mode == CREATE
    assert session.target_id is None
    assert session.submit_label == "Add transaction"


def test_begin_populates_form_with_magnitude():
    session = EditSession()
    values = session.begin(make_tx(7, "-12.50", "Food", "2024-03-05", "Lunch"))
    assert session.mode == EDIT
    assert session.target_id == 7
    assert session.submit_label == "Update transaction"
    assert values == FormValues("Lunch", "12.50", "Food", "2024-03-05")


def test_begin_on_another_record_switches_target():
    session = EditSession()
    session.begin(make_tx(1, -1))
    session.begin(make_tx(2, -2))
    assert session.target_id == 2
    assert session.targets(2)
    assert not session.targets(1)


def test_unlabeled_record_edits_as_other():
    values = EditSession().begin(make_tx(3, 5, category=""))
    assert values.category == "Other"


def test_reset_returns_blank_form_dated_today():
    session = EditSession()
    session.begin(make_tx(1, -1))
    values = session.reset()
    assert session.mode == CREATE
    assert session.target_id is None
    assert values == FormValues(date=today_str())
    assert values.category is None


def test_targets_is_false_in_create_mode():
    assert EditSession().targets(None) is False
