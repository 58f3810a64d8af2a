import logging
import os

logger = logging.getLogger(__name__)

WORDS_PER_LINE = 8


def write_hex_table(path, lgtable, ow, table):
    """Write ``table`` as a ``$readmemh`` file of ``ow`` bit words."""
    entries = 1 << lgtable
    if len(table) != entries:
        raise ValueError("Table holds %d entries, expected %d"
                         % (len(table), entries))

    mask = (1 << ow) - 1
    digits = (ow + 3) // 4
    with open(path, "w") as f:
        for k in range(0, entries, WORDS_PER_LINE):
            words = " ".join("{0:0{1}x}".format(int(v) & mask, digits)
                             for v in table[k:k + WORDS_PER_LINE])
            f.write("@%08x %s\n" % (k, words))
    logger.info("Wrote %d table entries to %s", entries, path)


class HexTablePersister(object):
    """Stores each table as ``<name>.hex`` inside ``directory``."""

    def __init__(self, directory="."):
        self.directory = directory

    def path(self, name):
        return os.path.join(self.directory, name + ".hex")

    def __call__(self, name, ow, lgtable, table):
        path = self.path(name)
        write_hex_table(path, lgtable, ow, table)
        return path
