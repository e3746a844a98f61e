import logging

from sqlalchemy.exc import SQLAlchemyError
from typing_extensions import NoReturn

from src.core.exceptions import EventServiceError, StoreAccessError

def handle_service_error(error: Exception, service_name: str, operation: str) -> NoReturn:
    logger = logging.getLogger(service_name)

    # Already classified (not found, bad filter, ...): pass through untouched
    if isinstance(error, EventServiceError):
        raise error

    logger.error(f"Error in {service_name} - {operation}: {str(error)}")

    if isinstance(error, SQLAlchemyError):
        raise StoreAccessError(operation) from error

    raise error
