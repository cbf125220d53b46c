class DashboardError(Exception):
    """Base class for errors that map onto an HTTP error response.

    Rendered by the application as ``{"error": message}`` (plus ``details``
    when present) with ``status_code``.
    """

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body: dict = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class PathOutsideRootError(DashboardError):
    status_code = 403

    def __init__(self, message: str = "Invalid file path") -> None:
        super().__init__(message)


class TranscriptNotFoundError(DashboardError):
    status_code = 404


class MissingUploadError(DashboardError):
    status_code = 400

    def __init__(self, message: str = "No file provided") -> None:
        super().__init__(message)


class UnsupportedMediaTypeError(DashboardError):
    status_code = 400

    def __init__(
        self,
        message: str = "Invalid file type. Please upload a video or audio file.",
    ) -> None:
        super().__init__(message)


class TranscriptionConfigError(DashboardError):
    status_code = 500


class TranscriptionFailedError(DashboardError):
    status_code = 500

    def __init__(self, details: str) -> None:
        super().__init__("Transcription failed", details)
