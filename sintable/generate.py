import logging

from .config import Strategy
from .direct import sintable
from .legal import PROJECT
from .quarter import quarterwav

logger = logging.getLogger(__name__)

EMITTERS = {
    Strategy.DIRECT: sintable,
    Strategy.QUARTER: quarterwav,
}


def generate(config, fname, project=PROJECT, persist=None):
    """Write the module for ``config`` to ``fname`` and persist its table.

    The configuration is validated before ``fname`` is opened, so a
    rejected request leaves no files behind.  Returns the module name.
    """
    config.validate()
    emit = EMITTERS[config.strategy]
    with open(fname, "w") as fp:
        name = emit(fp, fname, config, project=project, persist=persist)
    logger.info("Generated %s lookup %s (PW=%d, OW=%d)", config.strategy.value,
                name, config.phase_width, config.output_width)
    return name
