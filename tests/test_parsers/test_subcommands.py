import pytest

from cmdtree import Command, CommandParser, Option
from cmdtree.exceptions import (
    InvalidCommandDefinitionError,
    NoActionReachableError,
    UnknownOptionError,
    UnknownSubcommandError,
)


def add_item(args):
    return ("item", args)


def list_all(args):
    return ("list", args)


def build_tree():
    force = Option("force", "f")
    item = Command(name="item", action=add_item, options=[force])
    add = Command(name="add", subcommands=[item], options=[Option("dry-run", "n")])
    listing = Command(name="list", action=list_all)
    return Command(name="prog", subcommands=[add, listing])


def parse(root, *tokens):
    return CommandParser(root, ["prog", *tokens]).parse()


def test_nested_subcommand_resolution():
    root = build_tree()
    result = parse(root, "add", "item", "foo")
    assert result.action is add_item
    assert result.args == ["foo"]
    assert result.command.name == "item"
    assert [command.name for command in result.command_path] == ["prog", "add"]
    assert result.invoke() == ("item", ["foo"])


def test_unknown_subcommand_under_group():
    with pytest.raises(UnknownSubcommandError) as excinfo:
        parse(build_tree(), "add", "foo")
    assert excinfo.value.token == "foo"
    assert excinfo.value.command.name == "add"
    assert str(excinfo.value) == "no such subcommand 'foo'"


def test_subcommand_names_only_match_exactly():
    with pytest.raises(UnknownSubcommandError):
        parse(build_tree(), "ad")
    with pytest.raises(UnknownSubcommandError):
        parse(build_tree(), "ADD")


def test_words_after_leaf_are_positional():
    result = parse(build_tree(), "list", "add", "item")
    assert result.action is list_all
    assert result.args == ["add", "item"]


def test_options_are_scoped_to_current_command():
    root = build_tree()
    result = parse(root, "add", "-n", "item", "-f", "x")
    assert result.values["dry-run"] is True
    assert result.values["force"] is True
    assert result.args == ["x"]


def test_parent_option_not_visible_after_descending():
    with pytest.raises(UnknownOptionError):
        parse(build_tree(), "add", "item", "-n")


def test_stopping_on_group_fails():
    with pytest.raises(NoActionReachableError) as excinfo:
        parse(build_tree(), "add")
    assert excinfo.value.command.name == "add"


def test_dash_at_group_is_captured_then_fails_without_action():
    with pytest.raises(NoActionReachableError):
        parse(build_tree(), "-")


def test_dash_before_subcommand_is_kept():
    result = parse(build_tree(), "--", "list", "x")
    assert result.args == ["--", "x"]


def test_first_match_wins_without_validation_of_siblings():
    broken = Command(name="broken")
    root = Command(name="prog", subcommands=[Command(name="ok", action=list_all), broken])
    assert parse(root, "ok").action is list_all
    with pytest.raises(InvalidCommandDefinitionError):
        parse(root, "broken")


def test_invalid_root_fails_before_reading_tokens():
    tokens = iter(["prog", "a"])
    with pytest.raises(InvalidCommandDefinitionError):
        CommandParser(Command(name="prog"), tokens).parse()
    assert next(tokens) == "prog"
