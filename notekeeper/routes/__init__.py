# Routes package init
"""
NoteKeeper Backend - API Routes Package
========================================

Route Inventory:
    - notes.py:   GET /, POST /create, GET /get/{id},
                  PUT /update/{id}, DELETE /delete/{id}
    - health.py:  GET /health

Routes stay thin: resolve the store, call it once, shape the response.
"""
