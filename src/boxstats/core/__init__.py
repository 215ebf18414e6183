"""
Core domain models and mathematical primitives.

This module contains the quartile calculator and its value objects. It has
no knowledge of any chart or rendering layer.
"""
