"""
Configuration, logging and file utilities.
"""
