# Services package init
"""
Pet Store Backend: Services Layer
====================================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - PetStoreService: store upserts/lookups/deletes and the employee and
      customer associations, including the store-membership checks
"""
