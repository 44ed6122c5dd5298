"""Alphabet, integer and text codec engine shared by every variant."""
