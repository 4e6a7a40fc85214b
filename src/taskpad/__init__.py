"""In-memory personal task list with a draft/edit session and a console front end."""

__version__ = "0.1.0"
