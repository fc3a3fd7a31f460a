import logging

# stdout belongs to the sequence output, diagnostics stay quiet on stderr
DEFAULT_LOG_LEVEL = logging.WARNING


def get_logger(name: str = "fibbuzz", level: int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)

        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
