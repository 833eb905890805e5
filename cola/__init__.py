"""CIDR Optimization Lookup & Assignment."""

__version__ = "0.1.0"
