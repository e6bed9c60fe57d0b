# autopaws/models/__init__.py
from .health_event import EventCategory, HealthEvent
from .pet import LifeStage, PetProfile

__all__ = ['EventCategory', 'HealthEvent', 'LifeStage', 'PetProfile']
