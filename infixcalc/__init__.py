"""Integer infix expression calculator: conversion to postfix and evaluation."""

__version__ = "1.0.0"
__all__ = ["__version__"]