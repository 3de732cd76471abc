import logging

from transaction_service.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = None):
    """Configurar el logging del proceso (una sola vez)"""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
