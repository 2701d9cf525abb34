"""
PDF Shuffler - Utils Package

Utility modules for the application.
"""
