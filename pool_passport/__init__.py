"""Pool Passport - track treasure claimed around the harbour pools."""

from .models import Location, VisitRecord
from .session import PassportSession

__all__ = ['Location', 'VisitRecord', 'PassportSession']
