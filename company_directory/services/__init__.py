"""
Business logic service layer.

Maps info objects to entities, delegates to repositories and turns
unexpected failures into default values or failed results.
"""
