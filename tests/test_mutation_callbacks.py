from sharekit.errors import TransactionFailed
from sharekit.mutation_callbacks import MutationCallbacks


def _recording():
    events = []
    callbacks = (
        MutationCallbacks()
        .on_mutate(lambda: events.append("mutate"))
        .on_success(lambda v: events.append(("success", v)))
        .on_error(lambda e: events.append(("error", e)))
        .on_settled(lambda: events.append("settled"))
    )
    return callbacks, events


def test_new_is_empty():
    assert MutationCallbacks().is_empty() is True


def test_builder_makes_non_empty():
    assert MutationCallbacks().on_settled(lambda: None).is_empty() is False


def test_fire_success_order():
    callbacks, events = _recording()
    callbacks.fire_success("done")
    assert events == ["mutate", ("success", "done"), "settled"]


def test_fire_error_order():
    callbacks, events = _recording()
    err = TransactionFailed("boom")
    callbacks.fire_error(err)
    assert events == ["mutate", ("error", err), "settled"]


def test_hooks_are_consumed():
    callbacks, events = _recording()
    callbacks.fire_success(1)
    callbacks.fire_success(2)
    callbacks.fire_error(TransactionFailed("x"))
    assert events == ["mutate", ("success", 1), "settled"]
    assert callbacks.is_empty() is True


def test_error_only():
    errors = []
    callbacks = MutationCallbacks.error_only(errors.append)
    callbacks.fire_success(None)
    assert errors == []
    err = TransactionFailed("bad")
    MutationCallbacks.error_only(errors.append).fire_error(err)
    assert errors == [err]


def test_success_only():
    values = []
    MutationCallbacks.success_only(values.append).fire_success(5)
    assert values == [5]


def test_settled_only_runs_on_both_paths():
    count = []
    MutationCallbacks.settled_only(lambda: count.append(1)).fire_success(None)
    MutationCallbacks.settled_only(lambda: count.append(1)).fire_error(
        TransactionFailed("x")
    )
    assert len(count) == 2


def test_repr_reports_which_hooks_are_set():
    callbacks = MutationCallbacks().on_error(lambda e: None)
    assert repr(callbacks) == (
        "MutationCallbacks(on_mutate=False, on_success=False, "
        "on_error=True, on_settled=False)"
    )