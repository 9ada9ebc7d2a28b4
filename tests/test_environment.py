import pytest

from sable.errors import UnboundVariable, IoError, PortError
from sable.types.environment import Environment
from sable.types.port import Port, Direction


def test_define_then_lookup():
    env = Environment()
    assert env.define("x", 1) == 1
    assert env.lookup("x") == 1
    assert env.is_bound("x")


def test_lookup_unbound():
    with pytest.raises(UnboundVariable) as exc:
        Environment().lookup("missing")
    assert exc.value.operation == "Getting an unbound variable"
    assert exc.value.name == "missing"
    assert str(exc.value) == "Getting an unbound variable: missing"


def test_assign_requires_existing_binding():
    env = Environment()
    with pytest.raises(UnboundVariable) as exc:
        env.assign("x", 1)
    assert exc.value.operation == "Setting an unbound variable"
    assert not env.is_bound("x")


def test_assign_writes_into_the_existing_slot():
    env = Environment()
    env.define("x", 1)
    saved = env.snapshot()
    assert env.assign("x", 2) == 2
    assert saved["x"].value == 2


def test_define_allocates_a_fresh_slot():
    env = Environment()
    env.define("x", 1)
    saved = env.snapshot()
    env.define("x", 2)
    assert env.lookup("x") == 2
    assert saved["x"].value == 1
    assert saved["x"] is not env.vars["x"]


def test_snapshot_is_read_only_and_detached():
    env = Environment()
    env.define("a", 1)
    saved = env.snapshot()
    env.define("b", 2)
    assert "b" not in saved
    with pytest.raises(TypeError):
        saved["c"] = object()


def test_enter_overlays_captured_bindings():
    env = Environment()
    env.define("x", 1)
    env.define("y", 1)
    captured = env.snapshot()
    env.define("x", 99)
    env.define("z", 3)
    env.enter(captured)
    assert env.lookup("x") == 1
    assert env.lookup("y") == 1
    # live names the capture does not mention stay visible
    assert env.lookup("z") == 3


def test_restore_replaces_the_mapping_but_keeps_slot_contents():
    env = Environment()
    env.define("x", 1)
    saved = env.snapshot()
    env.define("local", 5)
    env.assign("x", 7)
    env.restore(saved)
    assert not env.is_bound("local")
    assert env.lookup("x") == 7


def test_update_defines_each_name():
    env = Environment()
    env.update({"b": 2, "a": 1})
    assert env.lookup("a") == 1
    assert env.lookup("b") == 2


def test_ports_get_fresh_handles(tmp_path):
    env = Environment()
    path = tmp_path / "data.txt"
    path.write_text("x\n", encoding="utf-8")
    first = env.open_read(str(path))
    env.close(first)
    second = env.open_read(str(path))
    third = env.open_write(str(tmp_path / "out.txt"))
    assert first.handle < second.handle < third.handle
    assert second.direction is Direction.READ
    assert third.direction is Direction.WRITE
    env.close_all()
    assert env.ports == {}


def test_close_is_idempotent(tmp_path):
    env = Environment()
    port = env.open_write(str(tmp_path / "out.txt"))
    assert env.close(port) is True
    assert env.close(port) is True
    assert env.close(Port(12345, Direction.READ)) is True


def test_open_missing_file():
    env = Environment()
    with pytest.raises(IoError) as exc:
        env.open_read("/nonexistent/dir/file.txt")
    assert exc.value.path == "/nonexistent/dir/file.txt"
    assert env.ports == {}


def test_borrow_checks(tmp_path):
    env = Environment()
    path = tmp_path / "out.txt"
    writer = env.open_write(str(path))
    assert env.borrow_writer(writer).write("hi") == 2

    with pytest.raises(PortError, match="Not a port"):
        env.borrow_reader(5)
    with pytest.raises(PortError, match="not open for read"):
        env.borrow_reader(writer)

    env.close(writer)
    with pytest.raises(PortError, match="Port is closed"):
        env.borrow_writer(writer)
    assert path.read_text(encoding="utf-8") == "hi"
