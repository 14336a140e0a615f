"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold business rules that span a repository call or more; they
    receive their repositories through the constructor.
    """

    pass
