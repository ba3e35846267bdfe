"""
Contains the core elements that are used within chainparams

Core:
    -Provides the byte stream helpers used by every serializable element
    -Provides the reference formats and protocol constants
    -Provides custom exceptions for the primitives and the parameter registry
"""
# core/__init__.py
from chainparams.core.byte_stream import *
from chainparams.core.exceptions import *
from chainparams.core.formats import *
from chainparams.core.serializable import *
