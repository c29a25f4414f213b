import io

from drillrunner import ui


class _FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def test_styles_wrap_text_and_reset():
    for style in (ui.bold, ui.red, ui.green, ui.blue):
        styled = style("hello")
        assert "hello" in styled
        assert styled.startswith("\x1b[")
        assert styled.endswith("\x1b[0m")


def test_styles_differ_from_each_other():
    outputs = {ui.bold("x"), ui.red("x"), ui.green("x"), ui.blue("x")}
    assert len(outputs) == 4


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Compilation failed")
    out = capsys.readouterr().out
    assert "Compilation failed" in out
    assert "!" in out
    assert "⚠" not in out


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("oops")
    out = capsys.readouterr().out
    assert "⚠" in out
    assert "oops" in out


def test_success_markers(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran it")
    plain = capsys.readouterr().out
    assert "✓" in plain and "✅" not in plain
    monkeypatch.delenv("NO_EMOJI")
    ui.success("Successfully ran it")
    fancy = capsys.readouterr().out
    assert "✅" in fancy


def test_spinner_silent_off_terminal():
    stream = io.StringIO()
    spinner = ui.Spinner("Compiling...", stream=stream)
    spinner.start()
    assert spinner.running is False
    spinner.set_message("Running...")
    assert spinner.message == "Running..."
    spinner.finish_and_clear()
    assert stream.getvalue() == ""


def test_spinner_draws_on_terminal():
    stream = _FakeTerminal()
    with ui.Spinner("Testing thing...", stream=stream, interval=0.01) as spinner:
        assert spinner.running is True
    assert spinner.running is False
    assert "Testing thing..." in stream.getvalue()


def test_progress_bar_partial():
    bar = ui.ProgressBar(10, position=3, stream=io.StringIO())
    text = bar.render()
    assert text.startswith("Progress: [")
    assert text.endswith("3/10")
    assert sum(text.count(c) for c in "#>-") == 60
    assert ">" in text


def test_progress_bar_empty_and_full():
    bar = ui.ProgressBar(4, stream=io.StringIO())
    empty = bar.render()
    assert "#" not in empty
    assert empty.count("-") == 60
    bar.inc(4)
    full = bar.render()
    assert full.endswith("4/4")
    assert full.count("#") == 60
    assert "-" not in full.split("]")[0]


def test_progress_bar_inc_defaults_to_one():
    bar = ui.ProgressBar(5, position=2, stream=io.StringIO())
    bar.inc()
    assert bar.position == 3
    assert bar.render().endswith("3/5")