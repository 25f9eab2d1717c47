"""
Utility modules for Recruit Match.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
- exceptions: Error taxonomy
"""

from recruit_match.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from recruit_match.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    CandidateStatus,
    EducationLevel,
    JobStatus,
    MatchFactor,
    MatchScoreLevel,
    SeniorityLevel,
)
from recruit_match.utils.exceptions import (
    InvalidWeightsError,
    JobNotFoundError,
    NotFoundError,
    RecruitMatchError,
)
from recruit_match.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "CandidateStatus",
    "EducationLevel",
    "JobStatus",
    "MatchFactor",
    "MatchScoreLevel",
    "SeniorityLevel",
    # Exceptions
    "InvalidWeightsError",
    "JobNotFoundError",
    "NotFoundError",
    "RecruitMatchError",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
]
