"""
Cardsmith.

Backend for a card-game content manager: games, their cards, and decks
built from those cards, served from an in-memory store with a mock API.
"""
