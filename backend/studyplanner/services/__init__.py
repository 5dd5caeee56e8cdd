"""
StudyPlanner Backend: Services Layer
=====================================

What:  Logic that spans a repository and another collaborator.

Service Inventory:
    - AuthService: checks login credentials against the stored bcrypt hash
"""
