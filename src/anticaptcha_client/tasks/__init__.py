"""
Task lifecycle.

Components:
- task_models.py: request variants, handle and status
- submitter.py: createTask, returns a TaskHandle
- resolver.py: polls getTaskResult until the task leaves "processing"
"""
