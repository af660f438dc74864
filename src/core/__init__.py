"""
Core domain models and contracts.

This module contains the value objects and JSON contracts shared by
switches, grading and the demo CLI.
"""
