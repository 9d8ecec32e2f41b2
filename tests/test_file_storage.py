import json

import pytest

from sharekit.errors import SerializationError, StorageKeyError
from sharekit.keys.file_storage import FileStorageKey
from sharekit.shared import Shared
from sharekit.shared_key import SaveContext
from sharekit.shared_reader_key import LoadContext, SharedSubscriber


def test_load_missing_file_returns_none(tmp_path):
    key = FileStorageKey(tmp_path / "missing.json")
    assert key.load(LoadContext.user_initiated()) is None


def test_save_then_load_round_trip(tmp_path):
    key = FileStorageKey(tmp_path / "settings.json")
    value = {"theme": "dark", "size": 12, "tags": ["a", "b"], "on": True}
    key.save(value, SaveContext.DID_SET)
    assert key.load(LoadContext.user_initiated()) == value


def test_save_writes_pretty_json(tmp_path):
    path = tmp_path / "pretty.json"
    FileStorageKey(path).save({"a": 1}, SaveContext.USER_INITIATED)
    assert path.read_text(encoding="utf-8") == '{\n  "a": 1\n}'


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "deeper" / "value.json"
    key = FileStorageKey(path)
    key.save([1, 2, 3], SaveContext.DID_SET)
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == [1, 2, 3]


def test_id_includes_path(tmp_path):
    path = tmp_path / "id.json"
    assert FileStorageKey(path).id() == f"file:{path}"


def test_invalid_json_raises_serialization_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SerializationError):
        FileStorageKey(path).load(LoadContext.user_initiated())


def test_unserializable_value_raises_serialization_error(tmp_path):
    key = FileStorageKey(tmp_path / "bad.json")
    with pytest.raises(SerializationError):
        key.save(object(), SaveContext.DID_SET)


def test_reading_directory_raises_storage_error(tmp_path):
    directory = tmp_path / "adir"
    directory.mkdir()
    with pytest.raises(StorageKeyError):
        FileStorageKey(directory).load(LoadContext.user_initiated())


def test_parent_that_is_a_file_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(StorageKeyError):
        FileStorageKey(blocker / "child.json").save(1, SaveContext.DID_SET)


def test_subscribe_returns_inactive_subscription(tmp_path):
    key = FileStorageKey(tmp_path / "sub.json")
    sub = key.subscribe(LoadContext.user_initiated(), SharedSubscriber(lambda event: None))
    assert sub.active is False


def test_shared_persists_through_file(tmp_path):
    path = tmp_path / "counter.json"
    shared = Shared({"count": 0}, FileStorageKey(path))
    shared.with_lock(lambda cell: cell.value.update(count=5))

    reloaded = Shared({"count": 0}, FileStorageKey(path))
    assert reloaded.get() == {"count": 5}


def test_shared_uses_default_for_missing_file(tmp_path):
    shared = Shared(["x"], FileStorageKey(tmp_path / "none.json"))
    assert shared.get() == ["x"]