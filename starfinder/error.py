class StarfinderWarning(Warning):
    """
    Warning class for Starfinder
    """


class SkippedRecordWarning(StarfinderWarning):
    """
    A warning class to indicate when a catalog row is dropped because it could not be parsed into a star
    """
