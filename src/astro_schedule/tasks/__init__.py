"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Outcome)
- task_factory.py: raw text -> validated Task
- task_store.py: in-memory schedule with conflict checks
- notifications.py: publish/subscribe channel + logging listener
"""
