"""Utility functions and tools used across the genprov package.

**Core Utilities:**
- `logger`: Logging utilities and configuration
- `globals`: Global constants (shape labels, physical constants, sentinels)
- `enums`: Enumerated types shared across the package
- `factory`: Generic factory pattern implementations
- `stopwatch`: Performance timing utilities
"""
