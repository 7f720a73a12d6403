from pathlib import Path

from ext_organizer.console import Console


def test_plain_output_has_no_ansi(capsys):
    c = Console(color=False)
    c.found(2, ".pdf", Path("/tmp/docs"), ["a.pdf", "b.pdf"])
    c.summary(2, 0, "pdf")

    out = capsys.readouterr().out
    assert "\x1b[" not in out
    assert "FOUND: 2 file(s) ending with .pdf in /tmp/docs" in out
    assert "  - a.pdf" in out
    assert "DONE: Moved 2 file(s) to folder pdf." in out


def test_color_output_is_styled():
    assert "\x1b[" in Console(color=True).style("a.pdf", fg="green")
    assert Console(color=False).style("a.pdf", fg="green") == "a.pdf"


def test_color_dropped_when_not_a_terminal(capsys):
    # capsys is not a tty
    Console(color=True).moved("a.pdf")
    assert capsys.readouterr().out == "  ✔ a.pdf\n"


def test_failures_and_errors_go_to_stderr(capsys):
    c = Console(color=False)
    c.failed("a.pdf", "Permission denied")
    c.error("directory not found: /nope")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "✘ a.pdf: Permission denied" in captured.err
    assert "Error: directory not found: /nope" in captured.err


def test_summary_mentions_failures(capsys):
    Console(color=False).summary(1, 2, "MOV")
    assert "Moved 1 file(s) to folder MOV. 2 failed." in capsys.readouterr().out
