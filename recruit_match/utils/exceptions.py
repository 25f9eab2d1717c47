"""Exceptions raised by the matching engine and its configuration layer."""


class RecruitMatchError(Exception):
    """Base class for all Recruit Match errors."""


class NotFoundError(RecruitMatchError):
    """A referenced record does not exist in the data source."""

    def __init__(self, resource: str, resource_id: str) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found: {resource_id}")


class JobNotFoundError(NotFoundError):
    """The job posting id does not resolve."""

    def __init__(self, job_id: str) -> None:
        super().__init__("Job", job_id)


class InvalidWeightsError(RecruitMatchError, ValueError):
    """Weight configuration rejected by the configuration layer."""
