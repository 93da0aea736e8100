"""Presentation layer — date formatting and Rich/JSON rendering."""
