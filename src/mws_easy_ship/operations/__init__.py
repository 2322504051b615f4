"""
Operations package - Easy Ship facade and CLI support.

This package provides the EasyShipClient facade, one method per Easy Ship
action, plus the error mapping and output formatting used by the CLI.
"""
from .facade import EasyShipClient, OPERATION_KEYS, PATH, VERSION
from .mappers import exit_code_for, run_and_exit

__all__ = ["EasyShipClient", "OPERATION_KEYS", "PATH", "VERSION", "exit_code_for", "run_and_exit"]
