"""
Inventory example.

    python examples/inventory.py add item --count 3 widget gadget
    python examples/inventory.py -v list
    python examples/inventory.py add -h
"""
import logging

from cmdtree import Command, Option, OptionValues, run
from cmdtree.utils import setup_logging

STOCK: dict[str, int] = {"widget": 2}


def add_item(args: list[str], options: OptionValues) -> None:
    for name in args:
        STOCK[name] = STOCK.get(name, 0) + options["count"]
        print(f"added {options['count']} x {name}")


def list_items(args: list[str], options: OptionValues) -> None:
    if options["verbose"]:
        print(f"{len(STOCK)} item(s) in stock")
    for name, count in sorted(STOCK.items()):
        print(f"{name:<10} {count:>4}")


root = Command(
    name="inventory",
    help_text="Track items in stock.",
    options=[Option("verbose", "v", "Print more output.")],
    subcommands=[
        Command(
            name="add",
            help_text="Add things to the inventory.",
            subcommands=[
                Command(
                    name="item",
                    action=add_item,
                    help_text="Add one or more items.",
                    options=[Option("count", "c", "How many of each.", default=1)],
                ),
            ],
        ),
        Command(name="list", action=list_items, help_text="Show the inventory."),
    ],
)

if __name__ == "__main__":
    setup_logging(console_log_level=logging.WARNING)
    run(root)
