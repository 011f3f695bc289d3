"""Exception hierarchy for interface status fetching."""


class InterfaceStatusError(Exception):
    """Base exception for all interface status errors."""


class ProcessSpawnError(InterfaceStatusError):
    """The SSH client process could not be started."""

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"Failed to start {program}: {reason}")


class CommandFailedError(InterfaceStatusError):
    """The remote command exited with a non-zero status."""

    def __init__(self, stderr: str, returncode: int | None = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"SSH command failed: {stderr}")


class EncodingError(InterfaceStatusError):
    """Command output is not valid UTF-8 text."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid output encoding: {reason}")


class ParseError(InterfaceStatusError):
    """Command output is not a valid interface status record."""

    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(f"JSON parsing error: {diagnostic}")
