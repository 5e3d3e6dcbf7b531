"""
Domain package for the Brickset catalog.

Exports the record model and enumerations shared by the repository, queries
and reporting. Keep this package focused on data definitions and validation.
"""

from brickset.domain.models import Dimensions, LegoSet, PackagingType

__all__ = [
    "Dimensions",
    "LegoSet",
    "PackagingType",
]
