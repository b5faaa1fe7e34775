"""
Employee Tracker - department, role and employee management over a relational store.
"""

__version__ = "0.1.0"
