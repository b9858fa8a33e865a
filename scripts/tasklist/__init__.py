"""
Tasklist - single-page task list for the terminal.

Architecture:
- store.py: TaskStore, the single source of truth
- providers.py: RenderTarget protocol and RowView snapshots
- sync.py: ViewSynchronizer (full rebuild vs. single-row patch)
- controller.py: event handlers between input source and store
- views/: Textual screen/widget components
- app.py: Main application entry point
"""
