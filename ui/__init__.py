"""Qt user interface for the Roster Manager."""
