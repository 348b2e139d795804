"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           gui/main_window.py
Version:        1.0.0
Description:    Main application window. Collects the payment slip fields,
                submits them to the core and displays the resulting GiroCode.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QApplication, QFileDialog, QFormLayout, QFrame, QHBoxLayout, QLabel, QLineEdit,
    QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from core.config import AppConfig
from core.logger import get_logger
from core.models.payment import Payload, RawPaymentForm
from core.models.types import ErrorCorrectionLevel
from core.submission import SubmissionOrchestrator, SubmissionResult
from core.utils.girocode import GiroCodeGenerator
from gui.utils import pil_to_pixmap, show_selectable_message_box

logger = get_logger("gui.main_window")

QR_PREVIEW_SIZE = 240


class MainWindow(QMainWindow):
    """
    Payment slip form. Each click on 'Generate' is one submission.
    """
    payload_generated = pyqtSignal(str)

    def __init__(self, app_config: Optional[AppConfig] = None) -> None:
        super().__init__()
        self.app_config = app_config or AppConfig()
        self.orchestrator = SubmissionOrchestrator(renderer=self.render_code)

        self.current_payload: Optional[Payload] = None
        self.current_image: Any = None

        self.setWindowTitle(self.tr("Zahlschein2QR"))
        self.resize(720, 360)
        self._init_ui()
        self._set_code_available(False)

    def _init_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        master_layout = QHBoxLayout(central)

        # Left Side: Input Fields
        fields_container = QWidget()
        fields_layout = QVBoxLayout(fields_container)
        payment_form = QFormLayout()

        self.recipient_edit = QLineEdit()
        self.iban_edit = QLineEdit()
        self.iban_edit.setPlaceholderText("AT61 1904 3002 3457 3201")
        self.bic_edit = QLineEdit()
        self.bic_edit.setPlaceholderText(self.tr("optional"))
        self.amount_edit = QLineEdit()
        self.amount_edit.setPlaceholderText("EUR12.34")
        self.reference_edit = QLineEdit()
        self.reference_edit.setPlaceholderText(self.tr("structured, e.g. RF18..."))
        self.reason_edit = QLineEdit()
        self.reason_edit.setPlaceholderText(self.tr("ignored if a reference is given"))

        payment_form.addRow(self.tr("Recipient:"), self.recipient_edit)
        payment_form.addRow(self.tr("IBAN:"), self.iban_edit)
        payment_form.addRow(self.tr("BIC:"), self.bic_edit)
        payment_form.addRow(self.tr("Amount:"), self.amount_edit)
        payment_form.addRow(self.tr("Reference:"), self.reference_edit)
        payment_form.addRow(self.tr("Reason:"), self.reason_edit)

        self.btn_generate = QPushButton(self.tr("Generate"))
        self.btn_generate.setDefault(True)
        self.btn_generate.clicked.connect(self.submit)

        fields_layout.addStretch()
        fields_layout.addLayout(payment_form)
        fields_layout.addWidget(self.btn_generate)
        fields_layout.addStretch()
        master_layout.addWidget(fields_container, 2)

        for edit in self._edits():
            edit.returnPressed.connect(self.submit)
            edit.textEdited.connect(self._invalidate_code)

        # Right Side: GiroCode & Actions
        qr_container = QWidget()
        qr_layout = QVBoxLayout(qr_container)
        qr_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        giro_header = QLabel(self.tr("GiroCode (EPC)"))
        giro_header.setStyleSheet("font-weight: bold; color: #1565c0; font-size: 14px;")
        giro_header.setToolTip(self.tr("Standardized QR code for SEPA transfers (EPC-QR)."))
        qr_layout.addWidget(giro_header, 0, Qt.AlignmentFlag.AlignCenter)

        self.qr_label = QLabel()
        self.qr_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.qr_label.setFixedSize(QR_PREVIEW_SIZE, QR_PREVIEW_SIZE)
        self.qr_label.setFrameStyle(QFrame.Shape.StyledPanel | QFrame.Shadow.Sunken)
        self.qr_label.setStyleSheet("background-color: white; border: 1px solid #ccc;")
        qr_layout.addWidget(self.qr_label)

        btn_row = QHBoxLayout()
        self.btn_copy_payload = QPushButton(self.tr("Copy Payload"))
        self.btn_copy_payload.setToolTip(self.tr("Copy the raw GiroCode data for banking apps"))
        self.btn_copy_payload.clicked.connect(self.copy_payload)
        btn_row.addWidget(self.btn_copy_payload)

        self.btn_save_image = QPushButton(self.tr("Save Image..."))
        self.btn_save_image.clicked.connect(self.save_image)
        btn_row.addWidget(self.btn_save_image)
        qr_layout.addLayout(btn_row)

        master_layout.addWidget(qr_container)

    def _edits(self):
        return [
            self.recipient_edit, self.iban_edit, self.bic_edit,
            self.amount_edit, self.reference_edit, self.reason_edit,
        ]

    def read_form(self) -> RawPaymentForm:
        """Collects the raw field values exactly as typed."""
        return RawPaymentForm(
            recipient_name=self.recipient_edit.text(),
            iban=self.iban_edit.text(),
            bic=self.bic_edit.text(),
            amount=self.amount_edit.text(),
            reference=self.reference_edit.text(),
            reason=self.reason_edit.text(),
        )

    def render_code(self, payload_text: str, error_correction: ErrorCorrectionLevel):
        """Renderer collaborator handed to the orchestrator."""
        return GiroCodeGenerator.get_qr_image(
            payload_text,
            error_correction=error_correction,
            box_size=self.app_config.get_qr_box_size(),
            border=self.app_config.get_qr_border(),
        )

    def submit(self) -> Optional[SubmissionResult]:
        """
        Validates the form and, on success, displays the GiroCode.
        Any failure blocks with a message box and leaves no code behind.
        """
        self._invalidate_code()
        try:
            result = self.orchestrator.submit(self.read_form())
        except Exception as e:
            logger.error(f"Rendering the payment code failed: {e}", exc_info=True)
            show_selectable_message_box(
                self, self.tr("Error generating QR"), str(e), icon=QMessageBox.Icon.Critical
            )
            return None

        if not result.ok:
            show_selectable_message_box(
                self, self.tr("Invalid Input"), result.message, icon=QMessageBox.Icon.Warning
            )
            return result

        self.current_payload = result.payload
        self.current_image = result.rendered
        self.qr_label.setPixmap(pil_to_pixmap(result.rendered).scaled(
            QR_PREVIEW_SIZE, QR_PREVIEW_SIZE,
            Qt.AspectRatioMode.KeepAspectRatio, Qt.TransformationMode.SmoothTransformation
        ))
        self._set_code_available(True)
        self.statusBar().showMessage(self.tr("GiroCode generated."), 3000)
        self.payload_generated.emit(result.payload.text)
        return result

    def _invalidate_code(self, *_args) -> None:
        """Drops the displayed code once the input no longer matches it."""
        if self.current_payload is None and self.current_image is None:
            return
        self.current_payload = None
        self.current_image = None
        self.qr_label.setPixmap(QPixmap())
        self._set_code_available(False)

    def _set_code_available(self, available: bool) -> None:
        self.btn_copy_payload.setEnabled(available)
        self.btn_save_image.setEnabled(available)

    def copy_payload(self) -> None:
        """Copies the current GiroCode payload to the clipboard."""
        if self.current_payload is None:
            return
        QApplication.clipboard().setText(self.current_payload.text)
        self.statusBar().showMessage(self.tr("GiroCode payload copied to clipboard."), 3000)

    def save_image(self) -> None:
        """Saves the current GiroCode as PNG and remembers the directory."""
        if self.current_image is None:
            return

        start_dir = self.app_config.get_export_dir() or str(Path.home())
        path, _ = QFileDialog.getSaveFileName(
            self, self.tr("Save GiroCode"), str(Path(start_dir) / "girocode.png"), "PNG Images (*.png)"
        )
        if not path:
            return

        try:
            self.current_image.save(path)
        except OSError as e:
            logger.error(f"Could not save GiroCode to {path}: {e}")
            show_selectable_message_box(self, self.tr("Save Error"), str(e), icon=QMessageBox.Icon.Critical)
            return

        self.app_config.set_export_dir(str(Path(path).parent))
        logger.info(f"GiroCode saved to {path}")
        self.statusBar().showMessage(self.tr("Saved to %s") % path, 3000)
