import argparse
import asyncio
import logging
from dataclasses import replace

from core.config import get_settings, Settings
from core.logging_setup import setup_logging
from storage.remote import HttpTaskService, InMemoryTaskService
from storage.task_store import TaskStoreClient
from controller.page_controller import PageController
from gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_service(settings: Settings):
    if settings.offline:
        logger.info("Offline mode: tasks are kept in memory")
        return InMemoryTaskService()
    client = TaskStoreClient(settings.base_url, token=settings.token, timeout=settings.timeout)
    return HttpTaskService(client)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="icbutler", description="Task list client for the IC Butler store")
    p.add_argument("--base-url", help="task store URL (default: ICBUTLER_BASE_URL)")
    p.add_argument("--offline", action="store_true", help="use an in-memory store")
    p.add_argument("--log-level", help="console log level (default: ICBUTLER_LOG_LEVEL)")
    return p.parse_args(argv)


async def _run(ui: MainWindow, controller: PageController):
    controller.spawn(controller.show_list())
    await ui.run()


def main(argv=None):
    args = parse_args(argv)
    settings = get_settings()
    if args.base_url:
        settings = replace(settings, base_url=args.base_url.rstrip("/"))
    if args.offline:
        settings = replace(settings, offline=True)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())

    log_file = setup_logging(
        log_dir=settings.data_dir,
        console_level=getattr(logging, settings.log_level, logging.INFO),
    )
    logger.info("Starting; store=%s log=%s", "memory" if settings.offline else settings.base_url, log_file)

    service = build_service(settings)
    ui = MainWindow(settings.window_geometry, settings.topmost)
    controller = PageController(service, ui.content, on_error=ui.show_error, on_status=ui.set_status)
    ui.attach(controller)
    asyncio.run(_run(ui, controller))


if __name__ == "__main__":
    main()
