"""Pawns-Only Chess: a two-player text-interface pawn game."""
