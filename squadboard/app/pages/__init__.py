"""Pages of the SquadBoard application."""
