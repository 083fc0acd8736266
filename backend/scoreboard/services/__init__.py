"""Scoreboard domain services: players, admin credentials and settings.

HTTP routes call into these modules; they validate nothing about the
transport and return plain model objects or raise ``scoreboard.errors``.
"""
