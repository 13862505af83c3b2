"""
Main API configuration for Django Ninja Extra.
All API controllers are automatically registered here.
"""

import importlib
import inspect
import logging

from ninja_extra import NinjaExtraAPI

from community.core.api.base import BaseAPI

logger = logging.getLogger(__name__)

api = NinjaExtraAPI(
    title="Community API",
    version="1.0.0",
    description="Open source projects section of the community site",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    urls_namespace="community",
)


def register_controllers_from_module(api_instance: NinjaExtraAPI, module_path: str) -> None:
    """
    Dynamically import and register API controllers from a module.

    Controllers must inherit from BaseAPI to be registered.
    """
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError:
        logger.debug("Module %s not found, skipping", module_path)
        return

    for attr_name in dir(module):
        attr = getattr(module, attr_name)
        if inspect.isclass(attr) and issubclass(attr, BaseAPI) and attr is not BaseAPI:
            logger.debug("Registering controller: %s.%s", module_path, attr_name)
            api_instance.register_controllers(attr)


# Register controllers from each local app
LOCAL_APPS = [
    "community.projects",
    "community.interactions",
]

for app in LOCAL_APPS:
    register_controllers_from_module(api, f"{app}.api")
