"""
StudyPlanner Backend: API Routes Package
=========================================

What:  Resource handlers and the routers that mount them.

Route Inventory:
    - login.py:        POST /login
    - students.py:     /students[/{id}]
    - courses.py:      /courses[/{id}], /courses/students/{id}
    - assignments.py:  /assignments[/{id}], /assignments/students/{id}
    - schedules.py:    /schedules[/{id}], /schedules/courses/{id}, /schedules/students/{id}
    - health.py:       GET /health

Every resource handler extends `base.BaseHandler`; each module's
`create_router()` takes the repositories it needs so tests can pass stand-ins.
"""
