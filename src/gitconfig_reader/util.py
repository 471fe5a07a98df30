import sys


def get_logger(name=None):
    import logging

    toplevel = "gitconfig_reader"
    if name is None:
        logger_name = toplevel
    else:
        logger_name = toplevel + "." + name
    return logging.getLogger(logger_name)


def set_verbose_logging(logger):
    import logging

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    logger.setLevel(logging.DEBUG)


def die_error(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)
    sys.exit(1)
