import pytest

from slotdict.debug import dump_table
from slotdict.keys import StringKey
from slotdict.shared import set_debug_trace
from slotdict.table import Table


@pytest.fixture
def tracing():
    set_debug_trace(True)
    yield
    set_debug_trace(False)


def test_dump_table(capsys):
    t = Table(capacity=4)
    t.put(1, "uno")
    t.put(StringKey("b"), None)

    dump_table(t, "small")

    # "b" hashes to 98, slot 2
    assert capsys.readouterr().out == (
        "== small (2/4 slots used) ==\n"
        "000 <empty>\n"
        "001 1 -> 'uno'\n"
        "002 b -> None\n"
        "003 <empty>\n"
    )


def test_dump_default_table(capsys):
    dump_table(Table())
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "== table (0/256 slots used) =="
    assert len(lines) == 257
    assert lines[-1] == "255 <empty>"


def test_repr_lists_slots():
    t = Table(capacity=2)
    t.put(1, "uno")
    assert repr(t) == "Table(slots=[None, Entry(key=1, value='uno')])"


def test_trace_off_by_default(capsys):
    Table().put(StringKey("frutilla"), 1)
    assert capsys.readouterr().err == ""


def test_trace(capsys, tracing):
    t = Table()
    t.put(StringKey("frutilla"), 1)
    t.put(StringKey("naranja"), 2)
    t.get(StringKey("uva"))
    t.remove(StringKey("frutilla"))
    t.put(None, 3)

    err = capsys.readouterr().err
    assert "[trace] put frutilla: stored in slot 195\n" in err
    assert "[trace] put naranja: slot 195 held by frutilla\n" in err
    assert "[trace] get uva: not found\n" in err
    assert "[trace] remove frutilla: cleared slot 195\n" in err
    assert "[trace] put None: null key\n" in err
