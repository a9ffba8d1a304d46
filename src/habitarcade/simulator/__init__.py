"""Desktop pygame host for Habit Arcade games."""
