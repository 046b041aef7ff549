"""Domain service base."""


class Service:
    """Marker base for stateless services coordinating Agora repositories."""
