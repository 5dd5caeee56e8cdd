"""
StudyPlanner Backend: Middleware Package
=========================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so the access log line carries the id.
    - Access Log sees the final status code, including 404/405 produced by
      routing and the errors written by the dispatcher.
"""
