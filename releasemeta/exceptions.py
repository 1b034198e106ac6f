from typing import Optional


# Base class for everything the parser raises
class ReleaseParseError(Exception):
    pass


# Nothing usable left after title boundary resolution and cleanup
class EmptyTitleError(ReleaseParseError):
    message = "could not extract a valid title"

    def __init__(self, source: str = ""):
        self.source = source
        super().__init__(self.message)


# URL has no final path segment, or it cannot be percent-decoded
class InvalidUrlError(ReleaseParseError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


# Best-effort metadata lookup failed; callers log and drop it
class UpstreamMetadataLookupFailure(Exception):
    def __init__(self, service: str, reason: str, status_code: Optional[int] = None):
        self.service = service
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{service} lookup failed: {reason}")
