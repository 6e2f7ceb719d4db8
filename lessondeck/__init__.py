"""
LessonDeck - Course viewer for AI-generated lessons.

Lessons are read slide by slide, each lesson optionally closing with a
multiple-choice quiz. Progress is tracked per session and forwarded to a
persistence sink.
"""

__version__ = "0.1.0"
