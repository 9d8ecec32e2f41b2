from sharekit.presence import PresenceState


def test_default_state():
    state = PresenceState()
    assert state.user is None
    assert state.peers == {}
    assert state.is_loading is True
    assert state.error is None


def test_empty_state_has_no_peers():
    state = PresenceState()
    assert state.peer_count() == 0
    assert not state.has_peers()
    assert state.peer_ids() == []


def test_peer_count_and_ids():
    peers = {"peer-a": {"x": 1.0}, "peer-b": {"x": 2.0}}
    state = PresenceState(peers=dict(peers))
    assert state.peer_count() == len(peers)
    assert state.has_peers()
    assert sorted(state.peer_ids()) == sorted(peers)


def test_user_does_not_count_as_peer():
    state = PresenceState(user={"x": 0.0}, is_loading=False)
    assert state.peer_count() == 0
    assert not state.has_peers()
    assert state.user == {"x": 0.0}


def test_default_peers_are_not_shared_between_instances():
    first = PresenceState()
    second = PresenceState()
    first.peers["peer-a"] = {"x": 1.0}
    assert second.peers == {}
    assert first.peer_count() == 1


def test_peer_ids_is_a_fresh_list():
    state = PresenceState(peers={"peer-a": 1})
    ids = state.peer_ids()
    ids.append("peer-z")
    assert state.peer_ids() == ["peer-a"]