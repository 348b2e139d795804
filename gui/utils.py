import io

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap
from PyQt6.QtWidgets import QMessageBox


def show_selectable_message_box(parent, title, text, icon=None, buttons=None):
    """
    Shows a QMessageBox with text selection enabled.
    Supports both positional and keyword arguments for icon and buttons.
    """
    msg = QMessageBox(parent)
    if title: msg.setWindowTitle(title)
    if text: msg.setText(text)

    # Handle case where icon might be buttons (if called from old QMessageBox sites)
    if isinstance(icon, QMessageBox.StandardButton):
        if buttons is None:
            buttons = icon
            icon = QMessageBox.Icon.NoIcon

    if icon: msg.setIcon(icon)
    if buttons:
        msg.setStandardButtons(buttons)
    else:
        msg.setStandardButtons(QMessageBox.StandardButton.Ok)

    # Enable text selection
    msg.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse | Qt.TextInteractionFlag.LinksAccessibleByMouse)

    return msg.exec()


def pil_to_pixmap(img) -> QPixmap:
    """
    Converts a PIL (or qrcode PilImage) image to a QPixmap via an in-memory PNG.
    """
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    qimg = QImage.fromData(buffer.getvalue())
    return QPixmap.fromImage(qimg)
