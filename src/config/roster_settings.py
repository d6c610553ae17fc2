"""
Centralized Roster Settings

Class-level constants shared by the player registry, the roster domain
types and the logging setup. Change these in one place.
"""


class RosterSettings:
    """
    Roster management limits and defaults.
    """

    # ================================================================
    # POPULATION LIMITS
    # ================================================================

    MAXIMUM_CAPACITY = 100
    # Hard cap on registered players. Jersey numbers are drawn from
    # range(MAXIMUM_CAPACITY), so the two limits always agree.

    MAXIMUM_LINEUP_SIZE = 5
    # Players allowed on the floor in a single lineup.

    # ================================================================
    # LOGGING
    # ================================================================

    LOG_LEVEL = "INFO"
    LOG_DIR = "logs"
    REGISTRY_LOG_LEVEL = "INFO"

    @classmethod
    def jersey_number_range(cls) -> range:
        """All assignable jersey numbers, ascending."""
        return range(cls.MAXIMUM_CAPACITY)

    @classmethod
    def summary(cls) -> str:
        """Get a one-line summary of the active settings."""
        return (
            f"Capacity: {cls.MAXIMUM_CAPACITY} | "
            f"Lineup size: {cls.MAXIMUM_LINEUP_SIZE} | "
            f"Log level: {cls.LOG_LEVEL}"
        )
