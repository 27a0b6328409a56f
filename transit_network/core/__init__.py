"""
Core Package

Domain models, interfaces, errors and services of the transit network.
"""
