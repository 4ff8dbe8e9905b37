"""
Core seed point search functionality.
"""

from .geometry import Point, BoundingRect
from .point_set import PointSet, OutOfBoundsError
from .equation import Equation, RefinementOptions, Expression2D

__all__ = ['Point', 'BoundingRect', 'PointSet', 'OutOfBoundsError',
           'Equation', 'RefinementOptions', 'Expression2D']
