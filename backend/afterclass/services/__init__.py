# Services package init
"""
Afterclass API: Services Layer
===============================

What:  Business logic between routes (HTTP) and MongoDB (persistence).
How:   Services receive the database handle per call, perform one store
       operation, and return JSON-ready results or raise application errors.

Service Inventory:
    - LessonService: list, get, search and partial update of lessons
    - OrderService: list and create orders
"""
