"""
Exception hierarchy for depwatch.

Every failure in the install flow is terminal. Each exception carries enough
context for the CLI to print a single actionable line:
- Clear error message
- Service/command context
- Suggested user action
- Original exception preserved for debugging
"""

from typing import List, Optional


class DepwatchError(Exception):
    """
    Base exception for all depwatch errors.

    The rendered message joins the available context parts with `` | ``,
    so the top-level handler can print ``str(error)`` as-is.
    """

    def __init__(
        self,
        message: str,
        suggested_action: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        context: Optional[List[str]] = None,
    ):
        """
        Initialize DepwatchError.

        Args:
            message: Human-readable error message
            suggested_action: Suggested action for the user to resolve the issue
            original_exception: The original exception that was caught
            context: Extra ``"Key: value"`` fragments inserted after the message
        """
        self.message = message
        self.suggested_action = suggested_action
        self.original_exception = original_exception

        error_parts = [message]
        error_parts.extend(context or [])

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class MissingPackageError(DepwatchError):
    """Raised when no package identifier was supplied on the command line."""

    def __init__(self, message: str = "No package specified"):
        super().__init__(
            message=message,
            suggested_action="Pass the import path to install, e.g. `depwatch get github.com/owner/repo`",
        )


class ConfigurationError(DepwatchError):
    """Raised when configuration cannot be loaded or holds invalid values."""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message=message, original_exception=original_exception)


class ResolutionError(DepwatchError):
    """
    Raised when a package cannot be resolved into a dependency tree.

    This typically indicates:
    - The package does not exist or is not on GOPATH yet
    - The Go toolchain is missing or failed
    - Network/filesystem errors inside the resolver
    """

    def __init__(
        self,
        message: str,
        package: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        self.package = package

        context = [f"Package: {package}"] if package else []

        super().__init__(
            message=message,
            suggested_action=suggested_action,
            original_exception=original_exception,
            context=context,
        )


class StatsLookupError(DepwatchError):
    """
    Base exception for package statistics lookups.

    Raised directly for malformed data; subclasses cover transport failures.
    """

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize StatsLookupError.

        Args:
            message: Human-readable error message
            service: Name of the statistics service (e.g., "go-search")
            endpoint: URL that failed
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user
        """
        self.service = service
        self.endpoint = endpoint

        context = []
        if service:
            context.append(f"Service: {service}")
        if endpoint:
            context.append(f"Endpoint: {endpoint}")

        super().__init__(
            message=message,
            suggested_action=suggested_action,
            original_exception=original_exception,
            context=context,
        )


class StatsConnectionError(StatsLookupError):
    """Raised when the statistics service cannot be reached."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action="Check network connectivity and verify the service is accessible",
        )


class StatsTimeoutError(StatsLookupError):
    """Raised when the statistics request times out."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout_duration: Optional[float] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.timeout_duration = timeout_duration

        suggested_action = "Check network connectivity and retry"
        if timeout_duration:
            suggested_action += f" (timeout after {timeout_duration}s)"

        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class StatsResponseError(StatsLookupError):
    """Raised on a non-success status or an unparsable response body."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.status_code = status_code

        if status_code is not None and status_code >= 500:
            suggested_action = "Service is experiencing issues. Wait and retry"
        elif status_code == 404:
            suggested_action = "Verify the package is indexed by the statistics service"
        else:
            suggested_action = None

        if status_code is not None:
            message = f"{message} (HTTP {status_code})"

        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class ForwardingError(DepwatchError):
    """Raised when a forwarded package-manager command fails or cannot start."""

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.command = list(command or [])
        self.returncode = returncode

        context = []
        if self.command:
            context.append(f"Command: {' '.join(self.command)}")
        if returncode is not None:
            context.append(f"Exit status: {returncode}")

        suggested_action = None
        if isinstance(original_exception, FileNotFoundError):
            suggested_action = f"Install `{self.command[0]}` and make sure it is on PATH" if self.command else None

        super().__init__(
            message=message,
            suggested_action=suggested_action,
            original_exception=original_exception,
            context=context,
        )


class ConfirmationAbortedError(DepwatchError):
    """Raised when input ends before the user answered the confirmation prompt."""

    def __init__(self, message: str = "No answer received on standard input"):
        super().__init__(message=message)


__all__ = [
    "DepwatchError",
    "MissingPackageError",
    "ConfigurationError",
    "ResolutionError",
    "StatsLookupError",
    "StatsConnectionError",
    "StatsTimeoutError",
    "StatsResponseError",
    "ForwardingError",
    "ConfirmationAbortedError",
]
