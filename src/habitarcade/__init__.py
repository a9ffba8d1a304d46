"""Habit Arcade - XP mini-games for a habit tracker."""

__version__ = "0.1.0"
