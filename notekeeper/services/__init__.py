# Services package init
"""
NoteKeeper Backend - Services Layer
====================================

Service Inventory:
    - NoteStore: lock-guarded in-memory notes and id counter
"""
