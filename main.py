"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           main.py
Version:        1.0.0
Description:    Application entry point. Sets up configuration and logging,
                then either runs a single headless submission (when an IBAN
                is given on the command line) or launches the form window.
------------------------------------------------------------------------------
"""

import argparse
import sys
from typing import List, Optional

from core.config import AppConfig
from core.logger import get_logger, setup_logging
from core.models.payment import RawPaymentForm
from core.submission import SubmissionOrchestrator
from core.utils.girocode import GiroCodeGenerator

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_RENDER_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Zahlschein2QR - SEPA payment slip to GiroCode")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev')")
    parser.add_argument("--name", type=str, default="", help="Recipient name")
    parser.add_argument("--iban", type=str, default=None, help="Recipient IBAN (runs without GUI)")
    parser.add_argument("--bic", type=str, default="", help="Recipient BIC (optional)")
    parser.add_argument("--amount", type=str, default="", help="Amount, passed through verbatim (e.g. EUR12.34)")
    parser.add_argument("--reference", type=str, default="", help="Structured creditor reference")
    parser.add_argument("--reason", type=str, default="", help="Unstructured remittance text")
    parser.add_argument("--output", type=str, default=None, help="Write the GiroCode as PNG to this path")
    return parser


def run_headless(args: argparse.Namespace, app_config: AppConfig) -> int:
    """
    Runs one submission from command line arguments.
    Prints the payload to stdout; errors go to stderr.

    Returns:
        The process exit code.
    """
    logger = get_logger("cli")
    form = RawPaymentForm(
        recipient_name=args.name,
        iban=args.iban,
        bic=args.bic,
        amount=args.amount,
        reference=args.reference,
        reason=args.reason,
    )

    renderer = None
    if args.output:
        def renderer(payload_text, error_correction):
            return GiroCodeGenerator.get_qr_image(
                payload_text,
                error_correction=error_correction,
                box_size=app_config.get_qr_box_size(),
                border=app_config.get_qr_border(),
            )

    try:
        result = SubmissionOrchestrator(renderer=renderer).submit(form)
    except Exception as e:
        logger.error(f"Rendering the payment code failed: {e}", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_RENDER_ERROR

    if not result.ok:
        print(result.message, file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.output:
        try:
            result.rendered.save(args.output)
        except OSError as e:
            logger.error(f"Could not save GiroCode to {args.output}: {e}")
            print(f"error: {e}", file=sys.stderr)
            return EXIT_RENDER_ERROR
        logger.info(f"GiroCode saved to {args.output}")

    print(result.payload.text)
    return EXIT_OK


def run_gui(args: argparse.Namespace, app_config: AppConfig) -> int:
    from PyQt6.QtCore import QCoreApplication
    from PyQt6.QtWidgets import QApplication
    from gui.main_window import MainWindow

    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName(app_config.active_id)

    window = MainWindow(app_config=app_config)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Zahlschein2QR Entry Point.
    """
    parser = build_parser()
    args, _unknown = parser.parse_known_args(argv)

    app_config = AppConfig(profile=args.profile)

    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("core")
    logger.info(f"Zahlschein2QR started (Profile: {args.profile or 'default'})")

    if args.iban is not None:
        return run_headless(args, app_config)
    return run_gui(args, app_config)


if __name__ == "__main__":
    sys.exit(main())
