"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold rules that span several entities, such as a comment
    and the page collection it is being placed into.
    """

    pass
