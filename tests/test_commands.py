from prawn import commands, config
from prawn.buffer import Buffer


def test_exact_match_only(make_context):
    context = make_context(["abc"])
    assert not commands.process_command(context, " q")
    assert not commands.process_command(context, "Q")
    assert not commands.process_command(context, "q ")
    assert not context.exit_flag


def test_quit_aliases(make_context):
    for name in ("q", "quit"):
        context = make_context(["abc"])
        assert commands.process_command(context, name)
        assert context.exit_flag


def test_write_reports_bytes(make_context, tmp_path):
    path = tmp_path / "doc.txt"
    context = make_context(["abc", "de"], filename=str(path))
    context.buffer.insert_char(0, 0, "x")
    commands.process_command(context, "w")
    assert path.read_text() == "xabc\nde\n"
    assert not context.buffer.modified
    assert "written" in context.status_message


def test_write_without_name_reports_error(make_context):
    context = make_context(["abc"])
    commands.process_command(context, "w")
    assert context.status_message.startswith("no file name")
    assert not context.exit_flag


def test_write_to_new_name(make_context, tmp_path):
    path = tmp_path / "new.txt"
    context = make_context(["abc"])
    commands.process_command(context, f"w {path}")
    assert path.read_text() == "abc\n"
    assert context.buffer.filename == str(path)


def test_write_failure_is_reported(make_context, tmp_path):
    context = make_context(["abc"], filename=str(tmp_path / "missing" / "doc.txt"))
    commands.process_command(context, "w")
    assert context.status_message.startswith("error saving file")
    assert not context.exit_flag


def test_write_quit_stays_open_when_save_fails(make_context):
    context = make_context(["abc"])
    commands.process_command(context, "wq")
    assert not context.exit_flag


def test_write_quit(make_context, tmp_path):
    path = tmp_path / "doc.txt"
    context = make_context(["abc"], filename=str(path))
    commands.process_command(context, "wq")
    assert context.exit_flag
    assert path.read_text() == "abc\n"


def test_theme_switch_is_persisted(make_context, tmp_path):
    conf = tmp_path / "prawn.conf"
    context = make_context(["abc"])
    context.config_path = str(conf)
    commands.process_command(context, "theme shrimp")
    assert context.current_theme == "shrimp"
    assert config.load_config(str(conf))["theme"] == "shrimp"


def test_unknown_theme(make_context):
    context = make_context(["abc"])
    commands.process_command(context, "theme nosuch")
    assert context.current_theme == "boring"
    assert context.status_message == "unknown theme: nosuch"
