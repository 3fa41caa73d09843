class AppError(Exception):
    """Error carrying a human-readable message and an HTTP status code."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": {"message": self.message, "status": self.status_code}}


class NotFoundError(AppError):
    status_code = 404
