"""
Weather & News Backend — Application Package Initializer
==========================================================

What: A small FastAPI service that proxies a weather provider
      (OpenWeatherMap) and a news provider (NewsAPI) for a static front-end.

Architecture Note:

    ┌─────────────────────────────────────┐
    │    Middleware (request ID, logs)    │  ← cross-cutting concerns
    ├─────────────────────────────────────┤
    │         Routes (API Layer)          │  ← validate query, call client
    ├─────────────────────────────────────┤
    │     Services (Provider Clients)     │  ← one outbound GET each
    └─────────────────────────────────────┘

    Nothing is cached or stored. Provider JSON is passed through unchanged;
    every failure becomes one JSON error envelope in main.py.
"""

__version__ = "1.0.0"
