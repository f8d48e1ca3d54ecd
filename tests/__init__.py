"""
Test suite for Numverter Core

Contains:
- tests/unit/          : Unit tests for parser, renderer, arithmetic, pipeline,
                         calculator and JSON contracts
"""
