"""
NoteKeeper Backend - Package Initializer
=========================================

A single-process, memory-only note store served over HTTP.

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     NoteStore (services layer)      │  ← lock-guarded id counter + notes
    ├─────────────────────────────────────┤
    │          Schemas (Pydantic)         │  ← Note value + response models
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
