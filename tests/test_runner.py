import pytest

from cmdtree import Command, HelpRequest, Option, ParseResult, parse, run
from cmdtree.exceptions import UnknownSubcommandError


def build_tree(calls):
    def add_item(args, options):
        calls.append((args, options["count"]))
        return "added"

    item = Command(
        name="item",
        action=add_item,
        options=[Option("count", "c", "How many.", default=1)],
    )
    add = Command(name="add", subcommands=[item])
    return Command(name="prog", subcommands=[add])


def test_parse_library_mode():
    root = build_tree([])
    result = parse(root, ["prog", "add", "item", "x"])
    assert isinstance(result, ParseResult)
    assert result.args == ["x"]
    assert isinstance(parse(root, ["prog", "add", "-h"]), HelpRequest)
    with pytest.raises(UnknownSubcommandError):
        parse(root, ["prog", "remove"])


def test_run_invokes_action():
    calls = []
    result = run(build_tree(calls), ["prog", "add", "item", "-c", "2", "a", "b"])
    assert result == "added"
    assert calls == [(["a", "b"], 2)]


def test_run_uses_process_arguments(monkeypatch):
    calls = []
    monkeypatch.setattr("sys.argv", ["prog", "add", "item", "z"])
    run(build_tree(calls))
    assert calls == [(["z"], 1)]


@pytest.mark.parametrize(
    "argv, message",
    [
        (["prog", "remove"], "ERROR: no such subcommand 'remove'"),
        (["prog", "add"], "ERROR: command 'add': no subcommand provided"),
        (["prog", "add", "item", "-c"], "ERROR: missing argument for count"),
        (["prog", "add", "item", "-c", "x"], "ERROR: option(count): cannot parse int value 'x'"),
        (["prog", "-abc"], "ERROR: illegal short option -abc"),
        (["prog", "--nope"], "ERROR: unknown option --nope"),
    ],
)
def test_run_exits_1_on_error(capsys, argv, message):
    calls = []
    with pytest.raises(SystemExit) as excinfo:
        run(build_tree(calls), argv)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == message
    assert captured.out == ""
    assert calls == []


def test_run_exits_0_on_help(capsys):
    calls = []
    with pytest.raises(SystemExit) as excinfo:
        run(build_tree(calls), ["prog", "add", "item", "--help", "--nope"])
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert "usage: prog add item [options] [args...]" in captured.out
    assert calls == []


def test_run_with_custom_renderer():
    seen = []

    def renderer(command, command_path):
        seen.append((command.name, [ancestor.name for ancestor in command_path]))

    with pytest.raises(SystemExit) as excinfo:
        run(build_tree([]), ["prog", "add", "-h"], renderer=renderer)
    assert excinfo.value.code == 0
    assert seen == [("add", ["prog"])]


def test_action_exceptions_propagate():
    def explode(args):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run(Command(name="prog", action=explode), ["prog"])
