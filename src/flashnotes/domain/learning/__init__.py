"""
Learning bounded context - Domain layer.

This context handles flashcard practice over Markdown notes:
- Flashcard extraction from level-2 sections
- Practice sessions and their Markdown reports
- Keyword highlighting of free-text answers

Aggregates:
- FlashcardSession: one practice run over a fixed list of cards
"""
