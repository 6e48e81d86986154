import sys

import pytest

from glasstty.host import PtyHost


def run(code, rows=24, cols=80, term="dumb", before=None):
    with PtyHost([sys.executable, "-c", code], rows, cols, 0, 0, term) as host:
        host.spawn()
        if before is not None:
            before(host)
        out = bytearray()
        host.pump(out.append)
        host.process.wait()
    return bytes(out)


def test_output_is_relayed():
    assert b"hello" in run("print('hello')")


def test_term_variable_is_set():
    assert b"vt52" in run("import os; print(os.environ['TERM'])", term="vt52")


def test_window_size_is_set():
    out = run("import os; s = os.get_terminal_size(0); print(s.columns, s.lines)", rows=20, cols=72)
    assert b"72 20" in out


def test_write_reaches_command():
    out = run(
        "import sys; print(sys.stdin.readline().strip().upper())",
        before=lambda host: host.write(b"abc\n"),
    )
    assert b"ABC" in out


def test_empty_command_rejected():
    with pytest.raises(ValueError):
        PtyHost([], 24, 80, 0, 0, "dumb")


def test_too_low_baud_rejected():
    with PtyHost(["true"], 24, 80, 0, 0, "dumb") as host:
        with pytest.raises(ValueError):
            host.pump(lambda b: None, 5)


def test_closed_host_reads_nothing():
    host = PtyHost(["true"], 24, 80, 0, 0, "dumb")
    host.close()
    with pytest.raises(EOFError):
        host.read_byte()
    out = []
    host.pump(out.append)
    assert out == []