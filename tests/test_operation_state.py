from sharekit.operation_state import OperationState, OperationStatus


def test_default_is_idle():
    state = OperationState()
    assert state.is_idle()
    assert not state.is_loading()
    assert not state.is_success()
    assert not state.is_failure()
    assert state.value is None
    assert state.error is None


def test_idle_constructor_equals_default():
    assert OperationState.idle() == OperationState()
    assert OperationState.idle().status is OperationStatus.IDLE


def test_in_flight():
    state = OperationState.in_flight()
    assert state.is_loading()
    assert not state.is_idle()
    assert state.value is None
    assert state.started_at is not None and state.started_at > 0


def test_success():
    state = OperationState.success(42)
    assert state.is_success()
    assert not state.is_loading()
    assert state.value == 42
    assert state.error is None


def test_failure():
    state = OperationState.failure("connection timeout")
    assert state.is_failure()
    assert not state.is_success()
    assert state.value is None
    assert state.error == "connection timeout"


def test_map_success():
    state = OperationState.success(42)
    mapped = state.map(str)
    assert mapped.is_success()
    assert mapped.value == "42"
    assert mapped.finished_at == state.finished_at


def test_map_idle_stays_idle():
    mapped = OperationState.idle().map(str)
    assert mapped.is_idle()


def test_map_failure_preserves_error():
    mapped = OperationState.failure("boom").map(str)
    assert mapped.is_failure()
    assert mapped.error == "boom"


def test_map_in_flight_stays_in_flight():
    state = OperationState.in_flight()
    mapped = state.map(str)
    assert mapped.is_loading()
    assert mapped.started_at == state.started_at