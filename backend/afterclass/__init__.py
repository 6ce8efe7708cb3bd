"""
Afterclass API: Application Package
====================================

HTTP backend for booking after-school lessons. Lessons and orders are stored
as MongoDB documents.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← id parsing, validation
    ├─────────────────────────────────────┤
    │     Documents & Schemas (Data)      │  ← ObjectId handling, Pydantic
    ├─────────────────────────────────────┤
    │      Database (Persistence)         │  ← pymongo AsyncMongoClient
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
