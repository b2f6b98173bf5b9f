"""Domain service base."""


class Service:
    """Marker base for stateful domain services such as the comment tree
    and the voting coordinator."""
