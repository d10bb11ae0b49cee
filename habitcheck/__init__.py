"""HabitCheck: streaks, behavioral patterns and dashboard summaries for weekly-scheduled habits."""

__version__ = "1.0.0"
