"""Tests for the mutation channel and listener registry."""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyqt_gridgen.errors import FieldAccessError
from pyqt_gridgen.forms.grid_markers import grid_field
from pyqt_gridgen.forms.metadata_extractor import MetadataExtractor
from pyqt_gridgen.protocols import ChangeListener, ObjectChangeListener
from pyqt_gridgen.services import DiagnosticKind, ListenerRegistry, MutationChannel

from grid_models import Counter, DuckWatched, Guarded, Watched


@dataclass(frozen=True)
class Frozen:
    value: int = grid_field(1)


@dataclass
class LoudHook(ObjectChangeListener):
    value: int = grid_field(0)

    def on_field_value_changed(self, member):
        raise ValueError("hook failed")


def member_of(cls, name):
    return next(m for m in MetadataExtractor().extract(cls) if m.name == name)


def test_write_commits_and_reports_old_and_new(registry, sink):
    """Listeners receive member, old value, new value and owner."""
    received = []
    registry.register(lambda *args: received.append(args))
    counter = Counter()
    member = member_of(Counter, "count")

    event = MutationChannel(registry, sink).write(member, counter, 9)

    assert counter.count == 9
    assert received == [(member, 5, 9, counter)]
    assert (event.old_value, event.new_value, event.owner) == (5, 9, counter)


def test_owner_hook_runs_before_listeners(registry, sink):
    """The object's own hook is always notified first."""
    watched = Watched()
    registry.register(lambda member, old, new, owner: owner.log.append(f"listener:{member.name}"))
    registry.register(lambda member, old, new, owner: owner.log.append("second"))

    MutationChannel(registry, sink).write(member_of(Watched, "value"), watched, 4)

    assert watched.log == ["hook:value", "listener:value", "second"]


def test_owner_hook_fires_without_listeners(registry, sink):
    watched = Watched()
    assert len(registry) == 0
    MutationChannel(registry, sink).write(member_of(Watched, "value"), watched, 1)
    assert watched.log == ["hook:value"]


def test_failing_listener_is_isolated(registry, sink):
    """A raising listener is reported and later listeners still run."""
    calls = []

    def failing(*args):
        raise RuntimeError("listener broke")

    registry.register(failing)
    registry.register(lambda *args: calls.append(args[2]))
    counter = Counter()

    MutationChannel(registry, sink).write(member_of(Counter, "count"), counter, 7)

    assert counter.count == 7
    assert calls == [7]
    failures = sink.of_kind(DiagnosticKind.LISTENER_FAILURE)
    assert len(failures) == 1
    assert isinstance(failures[0].error, RuntimeError)


def test_change_listener_abc(registry, sink):
    """ChangeListener implementations are called through their method."""

    class Recorder(ChangeListener):
        def __init__(self):
            self.events = []

        def on_object_value_changed(self, member, old_value, new_value, owner):
            self.events.append((member.name, old_value, new_value))

    recorder = registry.register(Recorder())
    MutationChannel(registry, sink).write(member_of(Counter, "count"), Counter(), 6)
    assert recorder.events == [("count", 5, 6)]


def test_owner_hook_errors_propagate(registry, sink):
    """Hook failures are programmer errors; the write is already committed."""
    called = []
    registry.register(lambda *args: called.append(args))
    owner = LoudHook()

    with pytest.raises(ValueError, match="hook failed"):
        MutationChannel(registry, sink).write(member_of(LoudHook, "value"), owner, 3)

    assert owner.value == 3
    assert called == []


def test_access_errors_are_wrapped(registry, sink):
    """Read and write failures surface as FieldAccessError."""
    channel = MutationChannel(registry, sink)

    with pytest.raises(FieldAccessError) as excinfo:
        channel.write(member_of(Frozen, "value"), Frozen(), 2)
    assert isinstance(excinfo.value.__cause__, FrozenInstanceError)

    with pytest.raises(FieldAccessError):
        channel.read(member_of(Counter, "count"), object())


def test_registry_register_and_unregister():
    registry = ListenerRegistry()

    def listener(*args):
        pass

    registry.register(listener)
    registry.register(listener)
    assert len(registry) == 2
    assert registry.unregister(listener)
    assert listener in registry
    assert registry.unregister(listener)
    assert not registry.unregister(listener)
    assert len(registry) == 0


def test_registry_rejects_non_listeners():
    with pytest.raises(TypeError):
        ListenerRegistry().register(42)


def test_default_registry_is_shared():
    assert ListenerRegistry.instance() is ListenerRegistry.instance()
    assert MutationChannel().registry is ListenerRegistry.instance()


def test_property_failures_are_wrapped(registry, sink):
    """Any exception from a property getter or setter becomes FieldAccessError."""
    guarded = Guarded()
    member = member_of(Guarded, "level")
    channel = MutationChannel(registry, sink)

    channel.write(member, guarded, 3)
    assert guarded.level == 3

    with pytest.raises(FieldAccessError, match="rejected by setter") as excinfo:
        channel.write(member, guarded, -1)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert guarded.level == 3

    del guarded._level
    with pytest.raises(FieldAccessError):
        channel.read(member, guarded)


def test_hook_without_inheritance(registry, sink):
    """Objects defining on_field_value_changed are notified like subclasses."""
    duck = DuckWatched()
    assert isinstance(duck, ObjectChangeListener)
    assert not isinstance(Counter(), ObjectChangeListener)

    registry.register(lambda member, old, new, owner: owner.log.append("listener"))
    MutationChannel(registry, sink).write(member_of(DuckWatched, "value"), duck, 2)

    assert duck.value == 2
    assert duck.log == ["hook:value", "listener"]
