"""
Pet Store Backend: Application Package Initializer
====================================================

What: Marks the `pet_store` directory as a Python package.
Who:  Imported by uvicorn (`pet_store.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is split into layers, each depending only on the ones below:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs, paths, status codes
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Upserts, membership checks
    ├─────────────────────────────────────┤
    │   Repositories (Persistence Access) │  ← find / save / delete per entity
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
