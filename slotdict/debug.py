from .shared import printf
from .table import Table


def dump_table(table: Table, name: str = "table"):
    printf("== {0:s} ({1:d}/{2:d} slots used) ==\n", name, table.size(), table.capacity)

    for slot, entry in enumerate(table.slots):
        dump_slot(slot, entry)


def dump_slot(slot: int, entry) -> None:
    printf("{0:03d} ", slot)
    if entry is None:
        printf("<empty>\n")
    else:
        printf("{0!s} -> {1!r}\n", entry.key, entry.value)
