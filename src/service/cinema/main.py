"""
Cinema Service - process bootstrap

Wires the built-in notification subscribers once and seeds the demo
catalog. Front ends (GUI, CLI, HTTP) call the container's use cases.
"""

from src.platform.config.di import Container, container as default_container
from src.platform.logging.loguru_io import Logger


def bootstrap(
    container: Container | None = None, *, seed_demo_data: bool | None = None
) -> Container:
    container = container or default_container
    settings = container.config_service()

    bus = container.notification_bus()
    registered = bus.subscribers()
    for observer in (container.email_notifier(), container.revenue_logger()):
        if not any(existing is observer for existing in registered):
            bus.subscribe(observer)

    if settings.SEED_DEMO_DATA if seed_demo_data is None else seed_demo_data:
        container.seed_demo_data_use_case().seed()

    Logger.base.info(f'[BOOTSTRAP] {settings.PROJECT_NAME} v{settings.VERSION} ready')
    return container
