"""
Selection of the active network.

A NetworkSelector starts unselected. select(name) looks the network up in its registry, calls the optional
on_select hook and stores the parameter set; active() returns it. Code that cannot be handed a selector uses
the module-level functions, which act on one process-wide instance. Only that instance switches the base
parameters, so private selectors never move them away from the active network.
"""
from typing import Callable, Optional

from chainparams.core import NetworkNotSelectedError
from chainparams.core.config import Settings, load_settings
from chainparams.core.logging import get_logger
from chainparams.params.base import select_base_params
from chainparams.params.network import NetworkParameterSet
from chainparams.params.registry import ParameterRegistry, get_registry

logger = get_logger(__name__)

__all__ = ["NetworkSelector", "default_selector", "select_network", "active_parameters", "parameters_for",
           "select_network_from_settings"]


class NetworkSelector:

    def __init__(self, registry: Optional[ParameterRegistry] = None,
                 on_select: Optional[Callable[[str], object]] = None):
        self._registry = registry
        self._on_select = on_select
        self._active: Optional[NetworkParameterSet] = None

    @property
    def registry(self) -> ParameterRegistry:
        if self._registry is None:
            self._registry = get_registry()
        return self._registry

    @property
    def is_selected(self) -> bool:
        return self._active is not None

    def select(self, name: str) -> NetworkParameterSet:
        """
        Make `name` the active network. An unknown name raises UnknownNetworkError and leaves any prior
        selection in place. Selecting again replaces the previous choice.
        """
        params = self.registry.get(name)
        if self._on_select is not None:
            self._on_select(name)

        if self._active is not None and self._active.network_id != name:
            logger.warning(f"Active network changed from {self._active.network_id} to {name}")
        self._active = params
        logger.debug(f"Selected network {name}")
        return params

    def active(self) -> NetworkParameterSet:
        if self._active is None:
            raise NetworkNotSelectedError("No network selected; call select_network() first")
        return self._active

    def parameters_for(self, name: str) -> NetworkParameterSet:
        return self.registry.get(name)

    def reset(self) -> None:
        """Return to the unselected state"""
        self._active = None


# The process-wide selector is the only one that drives the base parameters
default_selector = NetworkSelector(on_select=select_base_params)


def select_network(name: str) -> NetworkParameterSet:
    return default_selector.select(name)


def active_parameters() -> NetworkParameterSet:
    return default_selector.active()


def parameters_for(name: str) -> NetworkParameterSet:
    return default_selector.parameters_for(name)


def select_network_from_settings(settings: Optional[Settings] = None,
                                 selector: Optional[NetworkSelector] = None) -> NetworkParameterSet:
    """
    Select the network named by CHAINPARAMS_NETWORK (or the given settings)
    """
    settings = settings or load_settings()
    return (selector or default_selector).select(settings.network)
