"""
Adapter implementations for the airport network.

Adapters are concrete implementations of the port interfaces and the
reporting collaborators.
"""
