"""Veterinary clinic manager: owners, pets, visits and vets."""

__version__ = "0.1.0"
