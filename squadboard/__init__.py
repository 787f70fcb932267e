"""SquadBoard: match time accounting and season statistics for youth football clubs."""

__version__ = "1.0.0"
