"""Infrastructure layer.

Configuration, database access and logging setup.
"""
