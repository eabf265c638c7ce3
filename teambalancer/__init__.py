"""SOWJS Team Balancer Backend - custom game team balancing API.

This package provides a hexagonal architecture implementation for
League of Legends summoner profiling and custom game team partitioning.

Layers:
- domain: Core business entities, value objects and pure scoring rules
- application: Use cases and port interfaces
- infrastructure: Adapters for external services
- api: REST endpoints
"""

__version__ = "0.1.0"
