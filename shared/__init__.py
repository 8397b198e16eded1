"""
Shared code for the indicators services: configuration, logging and models
"""
