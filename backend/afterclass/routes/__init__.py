# Routes package init
"""
Afterclass API: Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - health.py:   GET  /                   (plain-text liveness)
                   GET  /health             (JSON liveness probe)
    - lessons.py:  GET  /lessons            (list lessons)
                   GET  /lessons/{id}       (single lesson)
                   PUT  /lessons/{id}       (partial update)
                   GET  /search?q=          (substring search)
    - orders.py:   GET  /orders             (list orders)
                   POST /orders             (create order)

Static images under /images are mounted in main.py, not routed here.

Routes are thin: they pull values out of the request, call one service
method and return its result.
"""
