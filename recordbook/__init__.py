"""
Recordbook: Application Package
==================================

A small HTTP service that stores person records (name, age) in SQLite.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP parsing, status codes
    ├─────────────────────────────────────┤
    │   Services (Validator, RecordStore) │  ← bounds checks, SQL
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
