"""
Core business logic for coaching-model selection.

This module is framework-agnostic - it doesn't import FastAPI or any
infrastructure concerns. Everything in here is a pure function of its
arguments, so it can be tested and called concurrently without setup.
"""
