# Routes package init
"""
Weather & News Backend — API Routes Package
=============================================

Route Inventory:
    - weather.py:  GET /api/weather   (OpenWeatherMap pass-through)
    - news.py:     GET /api/news      (NewsAPI pass-through)
    - health.py:   GET /health        (service health check)
    - pages.py:    GET /              (front-end index.html)

Design Principle:
    Routes are THIN. They validate query parameters, call a provider client,
    and return its JSON untouched. Errors are raised, never formatted here;
    main.register_exception_handlers() is the only place that shapes them.
"""
