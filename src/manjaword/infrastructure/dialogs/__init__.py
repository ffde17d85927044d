"""File dialog adapters implementing FileDialogPort."""

from manjaword.infrastructure.dialogs.callback_dialog import CallbackFileDialog
from manjaword.infrastructure.dialogs.static_dialog import StaticFileDialog

__all__ = ["CallbackFileDialog", "StaticFileDialog"]
