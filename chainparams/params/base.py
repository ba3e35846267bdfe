"""
Base parameters: the small per-network identifiers other subsystems consult before full chain parameters
are needed (for example, the data directory a node stores its files in)
"""
from dataclasses import dataclass
from typing import Optional

from chainparams.core import NetworkNotSelectedError, UnknownNetworkError
from chainparams.params.networks import MAIN, REGTEST, TESTNET

__all__ = ["BaseParams", "BASE_PARAMS", "select_base_params", "base_params", "network_from_flags"]


@dataclass(frozen=True)
class BaseParams:
    network_id: str
    data_dir: str


BASE_PARAMS = {
    MAIN: BaseParams(MAIN, ""),
    TESTNET: BaseParams(TESTNET, "testnet3"),
    REGTEST: BaseParams(REGTEST, "regtest"),
}

_current: Optional[BaseParams] = None


def select_base_params(name: str) -> BaseParams:
    global _current
    if name not in BASE_PARAMS:
        raise UnknownNetworkError(name)
    _current = BASE_PARAMS[name]
    return _current


def base_params() -> BaseParams:
    if _current is None:
        raise NetworkNotSelectedError("No base parameters selected")
    return _current


def network_from_flags(testnet: bool = False, regtest: bool = False) -> str:
    """
    Map -testnet / -regtest style flags to a network id. Setting both is an error.
    """
    if testnet and regtest:
        raise ValueError("Invalid combination of testnet and regtest")
    if regtest:
        return REGTEST
    if testnet:
        return TESTNET
    return MAIN
