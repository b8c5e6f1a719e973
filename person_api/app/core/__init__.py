"""
Core infrastructure: settings, logging, the entity store and error
handlers shared by every API version.
"""
