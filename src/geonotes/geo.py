"""Geospatial helpers over GeoPoint/GeoArea (no external dependencies)."""

from __future__ import annotations

from .datamodel import GeoArea, GeoPoint


def contains(area: GeoArea, point: GeoPoint) -> bool:
    """Check whether a point lies inside or on the boundary of an area.

    Bounds are compared as given: ``area.top_left`` must hold the lower
    latitude/longitude and ``area.bottom_right`` the upper ones.
    """

    return (
        area.top_left.lat <= point.lat <= area.bottom_right.lat
        and area.top_left.lon <= point.lon <= area.bottom_right.lon
    )


def _format_degrees(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def classify(point: GeoPoint) -> str:
    """Return a region label for a point.

    Checked in order, first match wins: the origin, the equator, the
    Greenwich meridian, and otherwise the raw ``(lat,lon)`` pair.
    """

    if point.lat == 0 and point.lon == 0:
        return "ORIGIN"
    if point.lat == 0:
        return "Equator"
    if point.lon == 0:
        return "Greenwich"
    return f"({_format_degrees(point.lat)},{_format_degrees(point.lon)})"
