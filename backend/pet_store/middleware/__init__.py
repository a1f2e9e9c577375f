# Middleware package init
"""
Pet Store Backend: Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assigns the correlation id used by every log line
    2. Logging: one access line per request, carrying that id
"""
