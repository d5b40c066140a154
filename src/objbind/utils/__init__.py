"""
Contains some useful utility functions to read values back from bound objects.
"""
from .query_object import optional_property, required_property
