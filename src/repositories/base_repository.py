from operator import eq
from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
import logging

from src.models.base import Base

T = TypeVar('T', bound=Base)

# Signed 64-bit INTEGER primary keys
MIN_ENTITY_ID = -(2 ** 63)
MAX_ENTITY_ID = 2 ** 63 - 1

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model
    
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        if not MIN_ENTITY_ID <= entity_id <= MAX_ENTITY_ID:
            logger.warning(f"{self.model.__name__} id {entity_id} outside the store's key range")
            return None

        entity: Any | None = self.db.query(self.model).filter(eq(self.model.id, entity_id)).first()
        
        if not entity:
            logger.warning(f"{self.model.__name__} with id {entity_id} not found")
            
        return entity
    
    async def get_all(self) -> List[T]:
        try:
            entities = self.db.query(self.model).order_by(self.model.id).all()
            return entities
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} entities: {str(e)}")
            raise
    
    async def save(self, entity: T) -> T:
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            
            logger.info(f"Saved {self.model.__name__} with id {entity.id}")
            return entity
        except Exception as e:
            logger.error(f"Error saving {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise
    
    async def delete(self, entity: T) -> None:
        entity_id = entity.id
        try:
            self.db.delete(entity)
            self.db.commit()
            
            logger.info(f"Deleted {self.model.__name__} with id {entity_id}")
        except Exception as e:
            logger.error(f"Error deleting {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise
