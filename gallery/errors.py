# gallery/errors.py


class GalleryError(Exception):
    """Base error carrying the HTTP status it maps to."""
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class NotFoundError(GalleryError):
    status_code = 404


class MethodNotAllowedError(GalleryError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)
