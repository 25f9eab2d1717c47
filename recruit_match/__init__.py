"""Recruit Match: rule-based candidate-job compatibility engine."""

from recruit_match.utils.constants import APP_DISPLAY_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_DISPLAY_NAME
