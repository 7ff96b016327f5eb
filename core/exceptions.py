"""Service-layer exceptions shared by the recommendation service, the API and the CLI."""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class MissionNotFoundException(ServiceException):
    """Raised when a mission is not found."""
    pass


class MemberNotFoundException(ServiceException):
    """Raised when a member profile is not found."""
    pass


class RecommendationNotFoundException(ServiceException):
    """Raised when a recommendation is not found."""
    pass


class InvalidFeedbackException(ServiceException):
    """Raised when feedback carries a status other than accepted/refused."""
    pass
