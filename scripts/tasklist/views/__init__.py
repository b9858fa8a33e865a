"""Textual screens and widgets for the task list."""
