from logging.handlers import RotatingFileHandler
from gerador_pix import config
import os
import logging


NOME_HANDLER_ARQUIVO = 'gerador_pix.arquivo'
NOME_HANDLER_CONSOLE = 'gerador_pix.console'


def configurar_logging(log_dir=None):
    log_dir = log_dir or config.LOG_DIR

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    nomes = {h.get_name() for h in logger.handlers}
    if NOME_HANDLER_ARQUIVO in nomes or NOME_HANDLER_CONSOLE in nomes:
        return logger

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, config.LOG_ARQUIVO),
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUPS
    )

    file_handler.set_name(NOME_HANDLER_ARQUIVO)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        '[%(asctime)s] [%(levelname)s] - [%(message)s]'
    ))

    console = logging.StreamHandler()
    console.set_name(NOME_HANDLER_CONSOLE)
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter(
        '%(levelname)s: %(message)s'
    ))

    logger.addHandler(file_handler)
    logger.addHandler(console)

    return logger
