"""
Lambda handlers package for AWS Lambda functions.
"""
from .log_entry import handler as log_entry_handler
from .cycle_status import handler as cycle_status_handler
from .settings import handler as settings_handler

__all__ = ["log_entry_handler", "cycle_status_handler", "settings_handler"]
