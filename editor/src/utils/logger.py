"""Global logging and user-facing error reporting utilities"""
import sys
import logging
import traceback
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('collage')
_main_window = None

def set_main_window(window):
    """Set the main window reference for showing popups (None to detach)"""
    global _main_window
    _main_window = window

def report_warning(title: str, message: str):
    """Tell the user an operation was refused (precondition not met)"""
    _logger.warning(f"{title}: {message}")
    if _main_window:
        QMessageBox.warning(_main_window, title, message)

def report_error(title: str, message: str):
    """Tell the user an operation failed"""
    _logger.error(f"{title}: {message}")
    if _main_window:
        QMessageBox.critical(_main_window, title, message)

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an unexpected exception, then re-raise it
    
    Running from source the exception propagates untouched so the traceback
    reaches the console. In a packaged build the traceback goes to the
    'collage' logger and the user gets report_error() with user_message (or
    str(e)) before the exception propagates.
    
    Args:
        e: The exception being handled
        user_message: Text for the error dialog (optional)
        title: Dialog title
    """
    if DEBUG_MODE:
        raise e
    
    _logger.error(traceback.format_exc())
    report_error(title, user_message if user_message else str(e))
    raise e
