from dotenv import load_dotenv

load_dotenv()

from core.config import settings  # noqa: E402
from core.logging import get_module_logger  # noqa: E402
from server import server  # noqa: E402

server_app = server.handler
logger = get_module_logger()


def list_configs():
    """List all configuration settings keys"""
    config_settings = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


list_configs()
