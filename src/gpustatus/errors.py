"""Errors raised while collecting a status report.

Every error is fatal: the command reports the message and exits non-zero
without printing a partial table.
"""


class StatusError(Exception):
    pass


class HostnameError(StatusError):
    def __init__(self, cause: Exception):
        super().__init__(f"Failed to parse hostname: {cause}")


class EncodingError(StatusError):
    def __init__(self, cause: Exception):
        super().__init__(f"Failed to convert string: {cause}")


class TelemetryError(StatusError):
    def __init__(self, cause: Exception):
        super().__init__(f"Failed to query nvml library: {cause}")


class ResolutionError(StatusError):
    pass


class ProcessLookupFailed(ResolutionError):
    def __init__(self, pid: int):
        self.pid = pid
        super().__init__(f"Process {pid} reported by the GPU is not in the process table")


class UserLookupFailed(ResolutionError):
    def __init__(self, uid: int):
        self.uid = uid
        super().__init__(f"No user database entry for uid {uid}")
