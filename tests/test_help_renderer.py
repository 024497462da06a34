from rich.console import Console

from cmdtree import Command, Option
from cmdtree.help import HelpRenderer, get_metavar, get_option_flags, get_usage, render_help
from cmdtree.parser import HELP_OPTION


def build_tree():
    item = Command(
        name="item",
        action=print,
        help_text="Add an item.",
        options=[
            Option("count", "c", "How many.", default=1),
            Option("label", help="Item label.", default="none"),
            Option("force", "f", "Skip checks."),
        ],
    )
    add = Command(name="add", subcommands=[item], help_text="Add things.")
    return Command(name="prog", subcommands=[add]), add, item


def test_get_usage():
    root, add, item = build_tree()
    assert get_usage(root, []) == "prog [options] <command>"
    assert get_usage(item, [root, add]) == "prog add item [options] [args...]"


def test_get_metavar():
    assert get_metavar(Option("a")) == ""
    assert get_metavar(Option("a", default="")) == "TEXT"
    assert get_metavar(Option("a", default=0)) == "INT"
    assert get_metavar(Option("a", default=0.0)) == "FLOAT"


def test_get_option_flags():
    assert get_option_flags(HELP_OPTION) == "-h, --help"
    assert get_option_flags(Option("verbose", "v")) == "-v, --verbose"
    assert get_option_flags(Option("quiet")) == "    --quiet"
    assert get_option_flags(Option("host", "h", default="")) == "    --host"


def test_render_leaf(capsys):
    root, add, item = build_tree()
    HelpRenderer().render(item, [root, add])
    out = capsys.readouterr().out
    assert "usage: prog add item [options] [args...]" in out
    assert "Add an item." in out
    assert "-h, --help" in out
    assert "-c, --count INT" in out
    assert "(default: 1)" in out
    assert "--label TEXT" in out
    assert "(default: 'none')" in out
    assert "-f, --force" in out
    assert "commands:" not in out


def test_render_group(capsys):
    root, add, item = build_tree()
    render_help(add, [root])
    out = capsys.readouterr().out
    assert "usage: prog add [options] <command>" in out
    assert "commands:" in out
    assert "item" in out
    assert "Add an item." in out


def test_renderer_is_callable_with_custom_console():
    console = Console(record=True, width=100)
    root, _, _ = build_tree()
    HelpRenderer(console=console)(root, [])
    text = console.export_text()
    assert "usage: prog [options] <command>" in text
    assert "Add things." in text


def test_option_rows_align_when_label_has_brackets():
    console = Console(record=True, width=100)
    command = Command(
        name="prog",
        action=print,
        options=[Option("a[b]", help="Bracketed."), Option("abcd", help="Plain.")],
    )
    HelpRenderer(console=console).render(command, [])
    lines = console.export_text().splitlines()
    bracketed = next(line for line in lines if "Bracketed." in line)
    plain = next(line for line in lines if "Plain." in line)
    assert "--a[b]" in bracketed
    assert bracketed.index("Bracketed.") == plain.index("Plain.")
