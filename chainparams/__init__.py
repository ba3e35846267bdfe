"""
chainparams: consensus and network parameters for the Aeris chain

    from chainparams import select_network, active_parameters

    select_network("test")
    active_parameters().default_port  # 23200
"""
# chainparams/__init__.py
from chainparams.core.exceptions import *
from chainparams.params import *

__version__ = "0.1.0"
