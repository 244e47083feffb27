"""
Utilities - configuration, logging, IDN conversion and static tables
"""
