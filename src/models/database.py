import logging

from sqlalchemy import inspect
from src.models.base import Base, engine

# Entities must be imported so their tables are registered on Base.metadata
from src.models.entities import event  # noqa: F401

logger = logging.getLogger(__name__)

def create_tables():
    Base.metadata.create_all(bind=engine)
    
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    logger.info(f"Tables in database: {tables}")
