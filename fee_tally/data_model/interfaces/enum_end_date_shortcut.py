from enum import Enum


class EndDateShortcut(Enum):
    """
    Tokens accepted at the end-date prompt instead of a literal date.
    """
    QUINZAINE = "q"
    MONTH = "m"
