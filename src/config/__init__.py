"""
Configuration Module

Centralized settings for roster management.
"""

from .roster_settings import RosterSettings

__all__ = ['RosterSettings']
