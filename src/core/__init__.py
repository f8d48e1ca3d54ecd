"""
Core domain models, exact arithmetic primitives, and contracts.

This module contains the foundational building blocks that are independent
of any presentation layer (converter page, OCR, voice, AI front ends).
"""
