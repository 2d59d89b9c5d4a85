import logging
import os
import sys

import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from api.api_client import ApiClient
from api.category_api import CategoryAPI
from api.transaction_api import TransactionAPI
from api.user_api import UserAPI

from services.category_service import CategoryRegistry
from services.transaction_service import TransactionStore
from services.report_service import ReportService
from services.export_service import ExportService
from services.tracker_service import TrackerService

from ui.app_window import AppWindow
from utils import app_config
from utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main():
    # ── Configuration & logging ──────────────────────────────────────────────
    config = app_config.load_config()
    configure_logging(app_config.get_log_level(config))
    api_url = app_config.get_api_url(config)
    date_format = app_config.get_date_format(config)
    logger.info("Starting against %s", api_url)

    # ── Remote collaborator ──────────────────────────────────────────────────
    client = ApiClient(
        api_url,
        session_cookie=app_config.get_session_cookie(config),
        timeout=app_config.get_request_timeout(config),
    )
    user_api = UserAPI(client)
    category_api = CategoryAPI(client)
    tx_api = TransactionAPI(client)

    # ── Services ─────────────────────────────────────────────────────────────
    registry = CategoryRegistry(category_api)
    store = TransactionStore(tx_api, registry)
    tracker = TrackerService(
        user_api,
        registry,
        store,
        ReportService(registry),
        ExportService(date_format),
    )

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(config.get("appearance_mode", "system"))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(tracker=tracker, api_client=client, date_format=date_format)

    def on_close():
        client.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
