"""Path and URL conversion utilities.

Handles conversion between local filesystem paths and file:// URLs, with
proper handling of Windows drive letters versus POSIX absolute paths, and of
malformed URLs that carry the drive letter in the host (file://c:/path).

All functions here are pure: no filesystem access, no logging.
"""

from enum import Enum
from urllib.parse import SplitResult, quote, unquote, urlsplit

FILE_SCHEME = "file"


class ErrorKind(str, Enum):
    """Reason a path or URL could not be converted."""

    RELATIVE = "relative"
    REMOTE = "remote"
    UNSUPPORTED = "unsupported"


_MESSAGES = {
    ErrorKind.RELATIVE: "path or URL is not absolute",
    ErrorKind.REMOTE: "path or URL references remote location",
    ErrorKind.UNSUPPORTED: "URL uses unsupported scheme, query, or fragment",
}


class ConversionError(ValueError):
    """Raised when a path or URL cannot be converted."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        """Initialize conversion error.

        Args:
            kind: Which of the error kinds occurred
            message: Optional detail; defaults to the kind's description
        """
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)

    def to_error_response(self) -> dict[str, str]:
        """Convert to MCP-compatible error response.

        Returns:
            Error dict with status, error_code, and message fields
        """
        return {
            "status": "error",
            "error_code": self.kind.value,
            "message": self.message,
        }


def is_drive_letter(char: str) -> bool:
    """Return True if char is an ASCII letter (A-Z, a-z).

    str.isalpha() is not used because it accepts non-ASCII letters.
    """
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def has_drive_prefix(path: str) -> bool:
    """Return True if path starts with a drive letter and colon (e.g. "c:")."""
    return len(path) >= 2 and path[1] == ":" and is_drive_letter(path[0])


def _split_netloc(netloc: str) -> tuple[str | None, str]:
    """Split a network location into (userinfo, host).

    The port is left attached to the host, so "c:" stays "c:".
    """
    userinfo, sep, host = netloc.rpartition("@")
    if not sep:
        return None, netloc
    return userinfo, host


def _as_split_result(url: str | SplitResult) -> SplitResult:
    if isinstance(url, SplitResult):
        return url
    try:
        return urlsplit(url)
    except ValueError as e:
        raise ConversionError(ErrorKind.UNSUPPORTED, f"malformed URL: {url!r}: {e}") from e


def local_to_url(path: str) -> SplitResult:
    """Convert a local path to a file:// URL.

    Handles both path styles:
    - POSIX: /usr/bin/vi -> file:///usr/bin/vi
    - Windows: c:/windows/notepad.exe -> file:///c:/windows/notepad.exe

    Args:
        path: Absolute POSIX path or drive-letter path

    Returns:
        SplitResult for the URL; use .geturl() for the string form

    Raises:
        ConversionError: RELATIVE if the path is not absolute,
            REMOTE if the path is a network share (//server/share)

    Example:
        >>> local_to_url("/usr/bin/vi").geturl()
        'file:///usr/bin/vi'
    """
    if path.startswith("//"):
        raise ConversionError(ErrorKind.REMOTE, f"path references remote location: {path}")

    if not path.startswith("/"):
        if not has_drive_prefix(path):
            raise ConversionError(ErrorKind.RELATIVE, f"path is not absolute: {path!r}")
        path = "/" + path

    # Keep forward slashes and colons unencoded
    return SplitResult(FILE_SCHEME, "", quote(path, safe="/:"), "", "")


def url_to_local(url: str | SplitResult) -> str:
    """Convert a file:// URL to a local path.

    Any URL with a host is treated as remote, including the malformed
    file://c:/path form; see url_to_local_relaxed() for that.

    Args:
        url: URL string or parsed SplitResult

    Returns:
        Local path string (drive-letter paths come back as c:/...)

    Raises:
        ConversionError: REMOTE if the URL has a host, otherwise as
            url_to_local_relaxed()

    Example:
        >>> url_to_local("file:///c:/windows/notepad.exe")
        'c:/windows/notepad.exe'
    """
    parsed = _as_split_result(url)
    _, host = _split_netloc(parsed.netloc)
    if host:
        raise ConversionError(ErrorKind.REMOTE, f"URL has a host: {host}")
    return url_to_local_relaxed(parsed)


def url_to_local_relaxed(url: str | SplitResult) -> str:
    """Convert a file:// URL to a local path, tolerating a drive letter host.

    Unlike url_to_local(), file://c:/windows/notepad.exe is accepted and
    converted to c:/windows/notepad.exe. Any other host is remote.

    Args:
        url: URL string or parsed SplitResult

    Returns:
        Local path string

    Raises:
        ConversionError: UNSUPPORTED if the URL is not a plain file URL
            (other scheme, query, fragment, user info, empty or opaque path),
            REMOTE if the host is not a drive letter
    """
    parsed = _as_split_result(url)
    userinfo, host = _split_netloc(parsed.netloc)

    if (
        parsed.scheme != FILE_SCHEME
        or parsed.query
        or parsed.fragment
        or userinfo is not None
        or not parsed.path.startswith("/")
    ):
        raise ConversionError(ErrorKind.UNSUPPORTED, f"unsupported URL: {parsed.geturl()}")

    path = unquote(parsed.path)

    # host=c: path=/path -> /c:/path
    if host:
        if len(host) != 2 or not has_drive_prefix(host):
            raise ConversionError(ErrorKind.REMOTE, f"URL references remote host: {host}")
        path = "/" + host + path

    # /c:/path -> c:/path
    if len(path) >= 3 and path[0] == "/" and has_drive_prefix(path[1:]):
        path = path[1:]

    return path
