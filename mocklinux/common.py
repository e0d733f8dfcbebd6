import logging

import coloredlogs


def getColoredLogger(name, level=logging.INFO):
    """
    Get or create a coloredlogger. Loggers below `name` (mocklinux.kernel,
    mocklinux.transfer, ...) propagate to it and share its handler.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            coloredlogs.ColoredFormatter(
                fmt="%(asctime)s %(name)s %(levelname)s %(message)s", datefmt="%H:%M:%S"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(level)

    logger.propagate = False
    return logger


def flush_loggers(prefix):
    """
    Flush the handlers of `prefix` and every logger below it. Used before the
    process image is replaced, since buffered records would otherwise be lost.
    """
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name == prefix or name.startswith(prefix + "."):
            for handler in logger.handlers:
                handler.flush()
