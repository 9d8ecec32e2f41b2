# sharekit

Reactive shared state with pluggable persistence.

`sharekit` wraps a value in a `Shared` object. Each time the value changes,
`Shared` saves it through a persistence key and sends the new value to every
watcher. The package also has read-only views, cancellable subscriptions,
operation state tracking, lifecycle callbacks and typed mutation steps.

## Installation

```
pip install sharekit
```

To run the test suite, install the `test` extra:

```
pip install "sharekit[test]"
pytest
```

## Shared state

```python
from sharekit.shared import Shared
from sharekit.keys.in_memory import InMemoryKey

counter = Shared(0, InMemoryKey("counter"))

def increment(cell):
    cell.value += 1

counter.with_lock(increment)
print(counter.get())                         # 1

# A second Shared on the same key starts from the stored value.
again = Shared(0, InMemoryKey("counter"))
print(again.get())                           # 1
```

`with_lock(func)` calls `func` with a cell that holds the current value, all
under a lock. The function can replace `cell.value` or change it in place.
`with_lock` returns whatever the function returns. When the function is
done, the new value is saved through the key with `SaveContext.DID_SET` and
sent to watchers. If the function raises, the stored value stays as it was.
Errors from the key during this automatic save are ignored.

`save()` writes the current value with `SaveContext.USER_INITIATED`.
`load()` reloads from the key and does nothing when the key holds no value.
When a `Shared` is created, it loads from the key first. It uses the default
only when the key has nothing stored or cannot be read.

### Watching changes

```python
def set_to_42(cell):
    cell.value = 42

receiver = counter.watch()
counter.with_lock(set_to_42)
print(receiver.borrow())                     # 42
print(receiver.has_changed())                # True

reader = counter.reader()                    # read-only view
doubled = reader.map(lambda value: value * 2)
print(doubled.get())                         # 84
```

`sharekit.watch.channel(initial)` returns a connected `WatchSender` and
`WatchReceiver` pair. The sender has `send(value)` and `subscribe()`. The
receiver has these methods:

- `borrow()` returns the latest value.
- `borrow_and_update()` returns the latest value and marks it as seen.
- `has_changed()` tells whether a value has arrived since the receiver last looked.
- `add_listener(callback)` calls the callback with every later value. It returns a
  `SharedSubscription`, and cancelling that subscription removes the listener.

`SharedReader(initial, receiver)`, also available as `SharedReader.from_watch`,
returns `initial` until the channel sends a value. After that it returns the
channel's latest value.

## Persistence keys

- `sharekit.keys.in_memory.InMemoryKey(name)` keeps values in storage shared
  by the whole process, so they outlive any single `Shared`. Values are
  deep-copied when stored and when loaded. The key's id is `in_memory:<name>`.
- `sharekit.keys.file_storage.FileStorageKey(path)` stores the value as a
  pretty-printed JSON file and creates parent folders when needed. A missing
  file loads as no value. Invalid JSON raises `SerializationError`, and I/O
  failures raise `StorageKeyError`. The key's id is `file:<path>`.

To write your own key, subclass `SharedKey` from `sharekit.shared_key` and
implement `id`, `load`, `subscribe` and `save`:

- `load` receives a `LoadContext` from `sharekit.shared_reader_key`. That is
  either `LoadContext.initial_value(default)` or `LoadContext.user_initiated()`.
  It returns the stored value, or `None` to mean "use the default".
- `save` receives a `SaveContext`, either `DID_SET` or `USER_INITIATED`.
- `subscribe` receives a `SharedSubscriber` and returns a `SharedSubscription`.
  The key pushes external changes with `subscriber.yield_value(value)`, and a
  `Shared` that is listening takes the new value on. The subscriber also has
  `yield_returning_initial_value()` and `yield_error(error)`, which deliver
  `SubscriberEvent` objects.

For a read-only source, subclass `SharedReaderKey` instead.

## Subscriptions

```python
from sharekit.subscription import SharedSubscription

with SharedSubscription(lambda: print("cancelled")):
    ...
```

A subscription runs its cancel function at most once. That happens on
`cancel()`, when the `with` block ends, or when the object is garbage
collected. `SharedSubscription.empty()` has nothing to cancel. The `active`
property tells whether the cancel function is still pending.

## Operation state and callbacks

```python
from sharekit.operation_state import OperationState
from sharekit.mutation_callbacks import MutationCallbacks

state = OperationState.success(42)
print(state.is_success(), state.map(str).value)   # True 42

failed = OperationState.failure("connection timeout")
print(failed.is_failure(), failed.error)

callbacks = (
    MutationCallbacks()
    .on_mutate(lambda: print("starting"))
    .on_success(lambda value: print("done", value))
    .on_error(lambda error: print("failed", error))
    .on_settled(lambda: print("settled"))
)
callbacks.fire_success(None)
print(callbacks.is_empty())                       # True: firing uses up the hooks
```

An `OperationState` is a frozen dataclass. Its `status` is one of the
`OperationStatus` values `IDLE`, `IN_FLIGHT`, `SUCCESS` and `FAILURE`. It has
the fields `value`, `error`, `started_at` and `finished_at`, and the timestamps
come from `time.monotonic()`. `map` transforms only a success value.

`MutationCallbacks.error_only`, `success_only` and `settled_only` are shortcuts
that set a single hook.

## Typed mutations

`sharekit.mutations.Mutator` turns records into transaction steps of the form
`[op, table_name, id, attrs]`. It hands those steps to a `Database`, which is
any subclass that implements `transact(steps)`:

```python
from dataclasses import dataclass
from sharekit.mutations import Database, Mutator, Table

@dataclass
class Todo(Table):
    TABLE_NAME = "todos"
    id: str
    title: str

class RecordingDatabase(Database):
    def __init__(self):
        self.steps = []

    def transact(self, steps):
        self.steps.extend(steps)

db = RecordingDatabase()
mutator = Mutator(Todo, db)
mutator.create(Todo(id="t1", title="Buy milk"))
# db.steps == [["update", "todos", "t1", {"id": "t1", "title": "Buy milk"}]]
mutator.link("t1", "owner", "u1")
mutator.delete("t1")
```

`create` takes the id from the record's `id` field. When the record does not
serialize to a dict with a string `id`, it raises `SerializationError`.
`update`, `delete`, `link` and `unlink` take the id explicitly.

Each operation also has a `*_with_callbacks` variant that takes a
`MutationCallbacks`. On success it fires the success path. On a
`SharingInstantError` it fires the error path and then raises
`TransactionFailed`.

## Errors

All errors derive from `sharekit.errors.SharingInstantError`. The subclasses are
`SerializationError`, `StorageKeyError`, `TransactionFailed` and `NotFoundError`.

## Presence

`sharekit.presence.PresenceState` holds this client's presence data (`user`),
the data of its peers keyed by peer id (`peers`), an `is_loading` flag that
starts as `True`, and an optional `error`. It provides `peer_count()`,
`has_peers()` and `peer_ids()`.

## What this package does not do

- It has no database and no network sync. `Mutator` only builds steps and
  passes them to the `Database` you supply.
- It does not join rooms or exchange presence with peers. `PresenceState` is a
  container only.
- The built-in keys do not report outside changes. The subscriptions of
  `InMemoryKey` and `FileStorageKey` are empty, so a file edited by another
  process is seen only after an explicit `load()`.