"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_errors.py: error taxonomy shared by codec and store
- task_codec.py: JSON file load/save
- task_store.py: in-memory collection with write-through persistence
"""
