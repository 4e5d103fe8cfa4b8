"""Pickup routing services."""

from .models import OptimizedRoute, Pickup, RouteStop, RouteStrategy
from .optimizer import optimize_route, route_distance

__all__ = ["OptimizedRoute", "Pickup", "RouteStop", "RouteStrategy", "optimize_route", "route_distance"]
