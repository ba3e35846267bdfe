"""
The ParameterRegistry: owns one NetworkParameterSet per supported network
"""
from typing import Callable, Iterator, Mapping, Optional

from chainparams.core import UnknownNetworkError
from chainparams.core.logging import get_logger
from chainparams.data import uint256_to_hex
from chainparams.params.network import NetworkParameterSet
from chainparams.params.networks import MAIN, REGTEST, TESTNET, main_params, regtest_params, testnet_params

logger = get_logger(__name__)

__all__ = ["ParameterRegistry", "get_registry", "NETWORK_FACTORIES"]

NETWORK_FACTORIES: Mapping[str, Callable[[], NetworkParameterSet]] = {
    MAIN: main_params,
    TESTNET: testnet_params,
    REGTEST: regtest_params,
}


class ParameterRegistry:
    """
    Builds every network's parameters exactly once, at construction. A genesis integrity failure or an
    invalid table raises here and no registry is produced.
    """

    def __init__(self, factories: Optional[Mapping[str, Callable[[], NetworkParameterSet]]] = None):
        factories = NETWORK_FACTORIES if factories is None else factories
        self._params: dict[str, NetworkParameterSet] = {}
        for name, factory in factories.items():
            params = factory()
            if params.network_id != name:
                raise ValueError(f"Factory for {name!r} built parameters for {params.network_id!r}")
            self._params[name] = params
            logger.info(f"Built {name} parameters; genesis {uint256_to_hex(params.genesis_hash)}")

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._params)

    def get(self, name: str) -> NetworkParameterSet:
        try:
            return self._params[name]
        except KeyError:
            raise UnknownNetworkError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[NetworkParameterSet]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self):
        return f"ParameterRegistry({', '.join(self._params)})"


_registry: Optional[ParameterRegistry] = None


def get_registry() -> ParameterRegistry:
    """
    The process-wide registry, built on first use
    """
    global _registry
    if _registry is None:
        _registry = ParameterRegistry()
    return _registry
