"""
Learning bounded context - Application layer.

Contains use cases for flashcard practice:
- Collecting flashcards from notes matching a pattern
- Creating sessions, recording answers, saving and listing reports
"""
