# Middleware package init
"""
Weather & News Backend — Middleware Package
=============================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the ID.
    CORS is FastAPI's CORSMiddleware; it answers preflight OPTIONS requests.
"""
