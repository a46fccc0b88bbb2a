"""Dashboard API app configuration."""

import logging
from django.apps import AppConfig

logger = logging.getLogger(__name__)


class DashboardApiConfig(AppConfig):
    """Dashboard API application configuration."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dashboard_api'
    verbose_name = 'StockKap Dashboard API'

    def ready(self):
        """Configure loguru sinks and report missing API keys."""
        from django.conf import settings
        from src.config import validate_config
        from src.utils.logger import setup_logger

        setup_logger(log_to_files=getattr(settings, 'LOG_TO_FILES', True))
        for problem in validate_config():
            logger.warning(f"Configuration: {problem}")
