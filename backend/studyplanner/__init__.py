"""
StudyPlanner Backend: Application Package
==========================================

A JSON API for planning study work: students, their courses, the weekly
schedule slots of those courses, and assignments with deadlines.

Layers:

    ┌─────────────────────────────────────┐
    │  Middleware (request id, access log)│
    ├─────────────────────────────────────┤
    │  Routes: BaseHandler dispatch,      │  ← method routing, auth, validation
    │  resource handlers                  │
    ├─────────────────────────────────────┤
    │  Schemas (pydantic), auth policy,   │
    │  request context, responses         │
    ├─────────────────────────────────────┤
    │  Repositories (data access)         │  ← one session per call
    ├─────────────────────────────────────┤
    │  Models + Database (SQLAlchemy)     │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
