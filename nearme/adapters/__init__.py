"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the services to external systems:
- Host URL handling (xdg-open, open, startfile)
- Routing services (OSRM)
- Local search services (Nominatim)
- Geo-distance computation (geopy)
"""
