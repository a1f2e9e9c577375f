# Routes package init
"""
Pet Store Backend: API Routes Package
========================================

Route Inventory:
    - pet_stores.py:  /pet_store endpoints (stores, employees, customers)
    - health.py:      GET /health (service health check)

Routes stay thin: read the path/body, call the service, return the schema.
"""
