"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPriority, TaskCategory, CategoryStyle)
- task_store.py: in-memory ordered store, the sole mutator of tasks
- task_api.py: boundary helpers used by the presentation layer
"""
