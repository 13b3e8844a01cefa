"""Behavioural models of an RGB to YCoCg converter and a point-to-point multiplier, with its testbench."""

__version__ = "0.1.0"
__all__ = ["ycocg", "dut", "testbench"]