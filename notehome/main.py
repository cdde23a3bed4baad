"""
Main entry point for Note Home.
Opens a notes folder and launches the main window.
"""

import argparse
import sys
from pathlib import Path

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    from notehome.utils.app_paths import get_default_vault_dir

    parser = argparse.ArgumentParser(prog="note-home", description="Note Home dashboard")
    parser.add_argument("vault", nargs="?", default=str(get_default_vault_dir()),
                        help="folder containing .md notes")
    parser.add_argument("--debug", action="store_true", help="verbose console logging")
    parser.add_argument("--log-file", action="store_true", help="also write a log file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Initialize logger first
    from notehome.utils.logger import logger
    from notehome.utils.app_paths import get_log_path

    logger.configure(debug=args.debug,
                     log_file=str(get_log_path()) if args.log_file else None)

    logger.info("=" * 40, component="APP")
    logger.info("Note Home starting", component="APP")
    logger.info(f"Vault: {args.vault}", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv[:1])

    from notehome.core.catalog import NoteCatalog
    from notehome.core.manager import NoteListManager
    from notehome.settings import SettingsStore
    from notehome.gui.main_window import MainWindow

    catalog = NoteCatalog(Path(args.vault))
    catalog.ensure_root()

    manager = NoteListManager(SettingsStore(), catalog)
    manager.attach(catalog.events)
    manager.seed_recent_if_empty()

    window = MainWindow(manager, catalog)
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
