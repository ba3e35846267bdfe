"""
Chain parameters for the Aeris networks

Params:
    -Consensus constants, network identity, address prefixes and checkpoints per network
    -Genesis block construction and verification
    -The parameter registry and the active-network selector
"""
# params/__init__.py
from chainparams.params.base import *
from chainparams.params.consensus import *
from chainparams.params.genesis import *
from chainparams.params.network import *
from chainparams.params.networks import *
from chainparams.params.registry import *
from chainparams.params.selector import *
