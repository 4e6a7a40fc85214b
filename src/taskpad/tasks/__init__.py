"""
Task subsystem.

Components:
- task_models.py: data structures (Task, MediaAttachment, StoreOutcome)
- task_store.py: in-memory ordered store + snapshot subscriptions
- draft.py: draft/edit session that turns "save" into create or update
- selection.py: detail-view selection
- task_api.py: small high-level helpers used by connectors (photo attach)
"""
