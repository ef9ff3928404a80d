"""Domain exceptions."""


class KissaError(Exception):
    """Base exception for the application."""

    code = "INTERNAL_ERROR"


class RepositoryError(KissaError):
    """A read or write against the backing store failed."""

    pass


class InvalidSearchError(KissaError):
    """A search request failed service-level validation."""

    code = "VALIDATION_ERROR"


class NotFoundError(KissaError):
    """A referenced entity does not exist (or is hidden from the caller)."""

    code = "NOT_FOUND"


class UserNotFoundError(NotFoundError):
    code = "USER_NOT_FOUND"


class PlaceNotFoundError(NotFoundError):
    code = "PLACE_NOT_FOUND"


class RegionNotFoundError(NotFoundError):
    code = "REGION_NOT_FOUND"


class CheckinNotFoundError(NotFoundError):
    code = "CHECKIN_NOT_FOUND"


class CheckinError(KissaError):
    """Base exception for rejected check-ins."""

    code = "CHECKIN_FAILED"


class UserInactiveError(CheckinError):
    code = "USER_INACTIVE"


class PlaceNotPublishedError(CheckinError):
    code = "PLACE_NOT_PUBLISHED"


class CheckinTooFarError(CheckinError):
    """The user's reported location is outside the place's geofence."""

    code = "CHECKIN_TOO_FAR"

    def __init__(self, distance_meters: float, max_distance_meters: float):
        self.distance_meters = distance_meters
        self.max_distance_meters = max_distance_meters
        super().__init__(
            f"User location is too far from place "
            f"({distance_meters:.0f} m, limit {max_distance_meters:.0f} m)"
        )


class FavoriteError(KissaError):
    code = "FAVORITE_FAILED"


class AlreadyFavoritedError(FavoriteError):
    code = "ALREADY_FAVORITED"


class NotFavoritedError(FavoriteError):
    code = "NOT_FAVORITED"
