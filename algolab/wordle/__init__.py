"""Wordle game, dictionary merger and encoder, and solver."""