"""Tkinter front end for the notes list.

Only the view modules and `gui.app.NotesApp.run` touch Tkinter; the
presenter, state and helpers import cleanly in headless test runs.
"""
