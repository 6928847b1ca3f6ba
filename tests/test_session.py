"""Session tests: input handling, notification order and computed results."""
import pytest
from pydantic import ValidationError

from integral_ratios import (
    Algorithm,
    BaseObserver,
    InvalidInput,
    ModelInput,
    Session,
    SessionConfig,
    UndefinedDomain,
)

OIL = ["85.47", "72.65", "21.37"]


@pytest.fixture
def session(recorder):
    s = Session()
    s.add_observer(recorder)
    return s


def test_new_session_has_default_input():
    s = Session()
    assert s.value_strings == ["3.14159", "1.0"]
    assert s.mask == [True, True]
    assert s.values == [3.14159, 1.0]
    assert s.length == 2
    assert s.ratio_outputs == []
    assert not s.finished


def test_set_input_raw_computes_lines(session, recorder):
    session.set_input_raw(OIL, [True, True, True])

    assert session.ratio_outputs == [[4, 3, 1], [8, 7, 2], [20, 17, 5]]
    assert session.finished
    assert session.pivot(0) == 2
    assert session.pivots == [2, 1, 2]
    assert session.ratio_scalar(0) == pytest.approx(8 / (85.47 + 72.65 + 21.37))
    assert recorder.events == ["inputs", "finished:False", "data", "finished:True", "data"]


def test_reset_notification_order(session, recorder):
    session.set_input_raw(OIL, [True, True, True])
    recorder.events.clear()

    session.reset()

    assert recorder.events[:3] == ["inputs", "settings", "finished:False"]
    assert session.value_strings == ["3.14159", "1.0"]
    assert session.ratio_outputs[0] == [3, 1]


def test_compute_lines_after_finish_is_noop(session):
    session.set_input_raw(OIL, [True, True, True])
    session.compute_lines(5)
    assert len(session.ratio_outputs) == 3


def test_restart_clears_results(session):
    session.set_input_raw(OIL, [True, True, True])
    session.restart()
    assert session.ratio_outputs == [[4, 3, 1], [8, 7, 2], [20, 17, 5]]


def test_autocompute_limit(recorder):
    s = Session(config=SessionConfig(autocompute_limit=3))
    s.add_observer(recorder)
    s.set_input_raw(OIL, [True, True, True])
    assert s.ratio_outputs == []
    assert recorder.events == ["inputs", "finished:False"]

    s.compute_lines(2)
    assert s.ratio_outputs == [[4, 3, 1], [8, 7, 2]]
    assert not s.finished


def test_set_value_from_string(session):
    session.set_value_from_string(0, "1.61803398")
    assert session.value_strings == ["1.61803398", "1.0"]
    assert session.ratio_outputs[:3] == [[1, 1], [2, 1], [3, 2]]


def test_exponent_notation_input_computes_lines(session):
    session.set_input_raw(["1e-3", "3e-4"], [True, True])
    assert session.values == [1e-3, 3e-4]
    assert session.ratio_outputs == [[3, 1]]
    assert session.finished


@pytest.mark.parametrize("value_string, error", [("pi", InvalidInput), ("0", UndefinedDomain)])
def test_rejected_value_leaves_session_unchanged(session, recorder, value_string, error):
    with pytest.raises(error):
        session.set_value_from_string(0, value_string)
    assert session.value_strings == ["3.14159", "1.0"]
    assert session.values == [3.14159, 1.0]
    assert recorder.events == []


def test_set_mask_value(session):
    session.set_length(3)
    session.set_mask_value(2, False)
    assert session.mask == [True, True, False]
    assert 2 not in session.pivots


def test_set_length(session):
    session.set_length(4)
    assert session.value_strings == ["3.14159", "1.0", "1.0", "1.0"]
    assert session.mask == [True] * 4

    session.set_length(2)
    assert session.value_strings == ["3.14159", "1.0"]
    assert session.algorithm.length == 2

    with pytest.raises(InvalidInput):
        session.set_length(1)


def test_set_input_copies_model_input(session):
    model_input = ModelInput(value_strings=["2.5", "1.0"], mask=[True, True])
    session.set_input(model_input)
    model_input.value_strings[0] = "9"
    assert session.value_strings == ["2.5", "1.0"]
    assert session.ratio_outputs[:2] == [[2, 1], [5, 2]]


def test_settings(session, recorder):
    session.set_output_precision(8)
    session.set_show_pivot(True)
    assert session.settings.output_precision == 8
    assert session.settings.show_pivot
    assert recorder.events == ["settings", "settings"]

    with pytest.raises(ValidationError):
        session.set_output_precision(0)


def test_remove_observer(session, recorder):
    session.remove_observer(recorder)
    session.set_show_pivot(True)
    assert recorder.events == []


def test_sessions_are_independent():
    first, second = Session(), Session()
    first.set_input_raw(OIL, [True, True, True])
    assert second.value_strings == ["3.14159", "1.0"]
    assert first.algorithm is not second.algorithm


def test_session_drives_given_algorithm():
    algorithm = Algorithm()
    s = Session(algorithm)
    s.set_input_raw(OIL, [True, True, True])
    assert s.algorithm is algorithm
    assert algorithm.finished


def test_base_observer_ignores_notifications():
    s = Session()
    s.add_observer(BaseObserver())
    s.reset()
    s.set_show_pivot(True)
    assert s.ratio_outputs[0] == [3, 1]
