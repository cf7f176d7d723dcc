"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and TaskError
- task_store.py: JSON file storage (whole-list read/write)
- task_repo.py: add/update/delete/list operations on top of the store
"""
